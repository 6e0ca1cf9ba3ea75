"""Shift computation and smoothing."""

from .shift import compute_shift, shift_candidates
from .smoothing import ShiftState, advance, steps_to_within

__all__ = [
    "compute_shift",
    "shift_candidates",
    "ShiftState",
    "advance",
    "steps_to_within",
]
