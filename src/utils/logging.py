"""Logger factory shared by calculation and data layers."""

from __future__ import annotations

import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
ROOT_LOGGER_NAME = 'src'


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; output is left to the application's handlers."""
    return logging.getLogger(name)


def configure_logging(level: str | int = 'INFO') -> logging.Logger:
    """Attach a stream handler to the package logger (once) and set its level."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f'Unknown log level `{level}`.')
        level = resolved
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
    return root
