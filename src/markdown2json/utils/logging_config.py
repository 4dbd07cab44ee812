"""Logging setup - all logs go to stderr so stdout carries only the JSON index."""

import logging
import sys


def setup_logging(verbosity: int = 0):
    """Setup logging to stderr: ERROR by default, INFO with -v, DEBUG with -vv."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
