#!/usr/bin/env python3
# File: gridtui/log.py
# Purpose: logger wiring for the app. The curses screen owns stdout/stderr, so
#          records only ever go to a file (or nowhere).

from __future__ import annotations

import logging

LOGGER_NAME = "gridtui"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(log_file: str | None = None, level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger. Safe to call more than once.
    Raises OSError if *log_file* cannot be opened; the previous handlers are kept then.
    """
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    logger.addHandler(handler)
    return logger


__all__ = ["LOGGER_NAME", "setup_logger"]
