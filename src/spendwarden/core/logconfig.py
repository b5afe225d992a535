"""Logging setup shared by the API process and scripts."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure the root logger with a single console handler.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        json_logs: Emit one JSON object per line instead of plain text
    """
    from spendwarden.api.middleware.logging import JSONLogFormatter

    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if json_logs:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    # Replace only the handler installed by an earlier call.
    for existing in list(root_logger.handlers):
        if getattr(existing, "_spendwarden", False):
            root_logger.removeHandler(existing)
    handler._spendwarden = True
    root_logger.addHandler(handler)
