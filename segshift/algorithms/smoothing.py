import math
from dataclasses import dataclass

from ..models import ShiftConfigError


def _check_alpha(alpha: float) -> None:
    if not 0 < alpha <= 1:
        raise ShiftConfigError(f"alpha must be in (0, 1], got {alpha}")


def advance(state: float, target: float, alpha: float) -> float:
    """One step of the exponential filter: state + (target - state) * alpha."""
    _check_alpha(alpha)
    return state + (target - state) * alpha


def steps_to_within(current: float, target: float, alpha: float, eps: float) -> int:
    """Number of advance() calls until |target - state| <= eps.

    The gap shrinks by a factor (1 - alpha) each step, so this is
    ceil(log(eps / gap) / log(1 - alpha)) for a gap larger than eps.
    """
    _check_alpha(alpha)
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")
    gap = abs(target - current)
    if gap <= eps:
        return 0
    if alpha == 1:
        return 1
    n = max(1, math.ceil(math.log(eps / gap) / math.log(1.0 - alpha)))
    # log rounding can overshoot by one when eps sits on a power of (1 - alpha)
    if n > 1 and gap * (1.0 - alpha) ** (n - 1) <= eps:
        n -= 1
    return n


@dataclass
class ShiftState:
    """Smoothed shift carried from one tick to the next."""

    current: float = 0.0
    ticks: int = 0

    def advance(self, target: float, alpha: float) -> float:
        self.current = advance(self.current, target, alpha)
        self.ticks += 1
        return self.current

    def reset(self) -> None:
        self.current = 0.0
        self.ticks = 0
