"""Logging setup for the arc-ai CLI.

Status messages meant for the user go through typer.echo; this logger
carries debug diagnostics (which provider ran, what git was asked to do)
and is silent unless --verbose is passed.
"""

import logging
import sys

LOGGER_NAME = "arc_ai"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger.

    Args:
        verbose: Emit DEBUG records when True, otherwise only WARNING and up.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Replace handlers so repeated invocations (e.g. in tests) don't stack them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
