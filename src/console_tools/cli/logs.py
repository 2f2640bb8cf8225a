"""Diagnostic logging setup for the console scripts.

Logging is silent by default; ``--verbose`` turns on DEBUG records from
every ``console_tools`` logger.  Records go to stderr so that stdout
carries only command output.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "console_tools"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the ``console_tools`` logger.

    Calling again replaces the handler installed by a previous call, so
    it always writes to the current ``sys.stderr``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        if handler.get_name() == LOGGER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(LOGGER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
