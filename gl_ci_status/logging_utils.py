"""Logging utilities for gitlab-ci-status."""

from __future__ import annotations

import logging
import sys


class PlainFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return f"[{record.levelname:<7}] {record.getMessage()}"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the gl-ci-status logger to write to stderr.

    The CLI takes no flags and always logs at INFO; ``verbose=True`` enables the DEBUG
    request and config traces for callers embedding the package.
    """
    logger = logging.getLogger("gl-ci-status")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(PlainFormatter())
    logger.addHandler(handler)
    return logger
