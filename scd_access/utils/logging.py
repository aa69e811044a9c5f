"""Logging configuration for the scd-access command line."""
import logging
import sys
from typing import Optional

# Loggers of the HTTP stack, silenced unless running verbose
HTTP_LOGGERS = ("urllib3", "requests")


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Attach handlers for command-line use.

    The library only creates module loggers. Records go to stderr so that
    command output on stdout stays machine-readable.

    Args:
        verbose: Log requests and local short-circuits (DEBUG) instead of WARNING only
        log_file: Optional file path to also write logs to
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        handlers=handlers
    )

    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(level)
