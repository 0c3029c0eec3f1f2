"""Logging configuration helpers."""

import logging

_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the ``reimagine`` logger and set its level.

    Repeated calls only update the level.
    """
    logger = logging.getLogger("reimagine")
    logger.setLevel(_resolve_level(level))
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO
