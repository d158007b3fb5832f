"""
Logging setup for the catalog proxy Cloud Function.

Deployed Cloud Functions capture stdout and forward it to Cloud Logging, so
records are printed rather than written to a file. Import and call
setup_cloud_logging() once from main.py.
"""

import logging
import os
import sys

from utils.get_logger import route_to_root


class CloudLoggingHandler(logging.Handler):
    """Handler that prints formatted records to stdout for Cloud Logging."""

    def emit(self, record):
        try:
            print(self.format(record), file=sys.stdout)
        except Exception:
            self.handleError(record)


class CloudLoggingFormatter(logging.Formatter):
    """Prefixes each message with its level name."""

    def format(self, record):
        message = super().format(record)
        return f"{record.levelname}: {record.name}: {message}"


def is_emulator() -> bool:
    return bool(os.getenv("FUNCTIONS_EMULATOR") or os.getenv("FIREBASE_AUTH_EMULATOR_HOST"))


def setup_cloud_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the root logger for the current runtime.

    In the emulator a plain stream handler is used. In deployed functions the
    print-based handler is installed and the named loggers from get_logger are
    switched to propagate to it instead of writing to their own console handler.
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler: logging.Handler
    if is_emulator():
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))
    else:
        handler = CloudLoggingHandler()
        handler.setFormatter(CloudLoggingFormatter("%(message)s"))
        route_to_root()

    handler.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    root_logger.info(
        "Logging configured for %s", "emulator" if is_emulator() else "Cloud Functions"
    )
    return root_logger
