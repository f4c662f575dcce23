"""Logging setup for scripts and applications embedding the auditor."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """
    Configure root logging for the auditor.

    Library modules only create loggers; call this once from the
    application entry point to route their output to stderr.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR) or number
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    # botocore is chatty at DEBUG; keep it at WARNING unless asked otherwise
    logging.getLogger("botocore").setLevel(max(level, logging.WARNING))
