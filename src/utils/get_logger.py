import logging
import os
from datetime import UTC, datetime
from logging.handlers import TimedRotatingFileHandler

import pytz

# Douban timestamps and the service's operators are both on Beijing time
TIMEZONE = pytz.timezone(os.getenv("LOG_TIMEZONE", "Asia/Shanghai"))
LOG_DIR = "/tmp/log/catalog_proxy"

"""
Multi-logger setup
logs to console and optionally to a rotating file under LOG_DIR
"""

Logger_Cache: dict[str, logging.Logger] = {}
Default_Level = logging.INFO
Route_To_Root = False


def set_level(level):
    global Default_Level
    Default_Level = level
    for logger in Logger_Cache.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


class LocalTimeFormatter(logging.Formatter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.local_tz = TIMEZONE

    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC).replace(tzinfo=pytz.utc)
        local_time = utc_dt.astimezone(self.local_tz)

        record.local_time = local_time.strftime("%H:%M:%S")
        record.name = record.name[0:24]
        if record.levelno == logging.WARN:
            self._style._fmt = "%(local_time)-9s %(name)-24s:%(levelname)-8s =====> %(message)s"
        elif record.levelno >= logging.ERROR:
            self._style._fmt = (
                "\n%(local_time)-9s %(name)-24s =====> ERROR \n%(message)s\n---END ERROR ---\n"
            )
        else:
            self._style._fmt = "%(local_time)-9s %(name)-24s:%(levelname)-8s %(message)s"

        return super().format(record)


class LocalFileFormatter(logging.Formatter):
    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC).replace(tzinfo=pytz.utc)
        record.utc_time = utc_dt.strftime("%Y-%m-%d %H:%M:%S")
        if record.levelno >= logging.WARN:
            self._style._fmt = "%(utc_time)s:%(name)s:%(levelname)s ===== %(message)s"
        else:
            self._style._fmt = "%(utc_time)s:%(name)s:%(levelname)s %(message)s"

        return super().format(record)


def _file_handler(filename: str, level) -> logging.Handler:
    os.makedirs(LOG_DIR, exist_ok=True)
    fullpath = os.path.join(LOG_DIR, os.path.basename(filename))
    try:
        handler: logging.Handler = TimedRotatingFileHandler(
            fullpath, when="midnight", backupCount=14
        )
    except FileNotFoundError:
        handler = logging.FileHandler(fullpath)
    handler.setLevel(level)
    handler.setFormatter(LocalFileFormatter())
    return handler


def get_logger(name: str, level=None, filename=None) -> logging.Logger:
    """Return a cached logger with a console handler and an optional file handler."""
    if name in Logger_Cache:
        return Logger_Cache[name]

    if level is None:
        level = Default_Level
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Replace whatever a previous import left behind
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if not Route_To_Root:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(LocalTimeFormatter())
        logger.addHandler(ch)

    if filename:
        logger.addHandler(_file_handler(filename, level))

    # Deployed functions print through the root logger, see setup_cloud_logging
    logger.propagate = Route_To_Root

    Logger_Cache[name] = logger

    return logger


def route_to_root():
    """Send every named logger through the root logger's handlers instead of its own console."""
    global Route_To_Root
    Route_To_Root = True
    for logger in Logger_Cache.values():
        for handler in logger.handlers[:]:
            if type(handler) is logging.StreamHandler:
                logger.removeHandler(handler)
        logger.propagate = True
