"""Logging setup shared by the command line and scripts."""

import logging

_LOGGER_CONFIGURED = False


def setup_logging(level: int | str = logging.INFO) -> None:
    """Install a console handler on the root logger (only once per process)."""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        logging.getLogger().setLevel(level)
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # matplotlib is chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(max(logging.INFO, logger.level))

    _LOGGER_CONFIGURED = True
