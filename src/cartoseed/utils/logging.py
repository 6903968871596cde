"""Logging utilities for cartoseed.

All submodules log through the single ``cartoseed`` logger defined here.  It
is silent by default (a ``NullHandler`` is installed); call
:func:`configure_logging` to get console output.
"""

import logging


# Global project-wide logger -------------------------------------------------
logger = logging.getLogger("cartoseed")
logger.addHandler(logging.NullHandler())

_LEVEL_MAP = {
    "none": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def level_from_name(name: str | None) -> int:
    """Map ``"none"``/``"info"``/``"debug"`` to a ``logging`` level."""
    if not name:
        return logging.WARNING
    return _LEVEL_MAP.get(str(name).strip().lower(), logging.WARNING)


def configure_logging(enabled: bool = True, level: int | str = logging.INFO) -> None:
    """Configure the global ``cartoseed`` logger.

    Parameters
    ----------
    enabled:
        If ``True`` (default) a ``StreamHandler`` is installed.  If ``False``
        logging output is suppressed.
    level:
        Level used when enabling the handler, either a ``logging`` constant or
        one of ``"none"``, ``"info"``, ``"debug"``.  Per-round sampler messages
        are emitted at ``DEBUG``.
    """

    # Calling twice must not stack handlers.
    logger.handlers.clear()

    if isinstance(level, str):
        level = level_from_name(level)

    if enabled:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(level)
    else:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)


__all__ = ["logger", "configure_logging", "level_from_name"]
