import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# uvicorn's "trace" has no stdlib equivalent
_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


def get_logger(name: str, level: int = logging.DEBUG) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def set_level(level: str | int) -> None:
    """Apply ``level`` (e.g. ``"info"``) to every logger created under ``blocker``."""
    if isinstance(level, str):
        level = _LEVELS[level.lower()]
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("blocker") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
