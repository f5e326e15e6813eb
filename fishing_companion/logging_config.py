"""
Logging configuration for the fishing companion service.
"""
import logging
import sys

FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-28s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the package logger. Safe to call more than once."""
    logger = logging.getLogger("fishing_companion")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(getattr(h, "_fishing_companion", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(FORMAT, datefmt=DATE_FORMAT))
        handler._fishing_companion = True
        logger.addHandler(handler)

    return logger
