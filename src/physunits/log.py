#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

import logging
import os

from logging.handlers import TimedRotatingFileHandler
from datetime import datetime
from .config import CONFIG, Settings, LOG_DIR

LOGGER_NAME = "physunits"
LOG_FILE = "physunits-%TIME%.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] [%(name)s] %(message)s"

# marks the handlers installed by init_logging, so they can be found and removed again
_HANDLER_MARK = "_physunits_log"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = CONFIG[Settings.LOG_LEVEL]
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        return resolved
    return level


def _installed_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _HANDLER_MARK, False)]


def _mark(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.formatter.default_time_format = "%b-%d %H:%M:%S"
    handler.formatter.default_msec_format = "%s.%03d"
    setattr(handler, _HANDLER_MARK, True)
    return handler


def init_logging(level: int | str = None, log_dir: str = None, console: bool = False) -> str | None:
    """
    Attach file (and optionally console) logging to the ``physunits`` logger.

    Only the package logger is configured; records keep propagating, so handlers of the host application still
    receive them. The log file rotates every 30 days and its name carries the current year and month in the
    configured local timezone. Calling it again while the handlers are installed does nothing.

    :param level: Logging level, as a number or a name such as "DEBUG"; defaults to ``Settings.LOG_LEVEL``.
    :type level: int | str
    :param log_dir: Directory of the log file; defaults to LOG_DIR.
    :type log_dir: str
    :param console: Also log to stderr.
    :type console: bool
    :return: Path of the log file, or None when logging was already initialized.
    :rtype: str | None
    :raises ValueError: If the level name is unknown.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if _installed_handlers(logger):
        return None

    level = _resolve_level(level)
    log_dir = log_dir or LOG_DIR
    os.makedirs(log_dir, exist_ok=True)
    now = datetime.now(CONFIG[Settings.LOCAL_TIMEZONE])
    logfile = os.path.join(log_dir, LOG_FILE.replace("%TIME%", now.strftime("%Y-%m")))

    logger.addHandler(_mark(TimedRotatingFileHandler(logfile, when='D', interval=30, backupCount=12,
                                                     encoding='utf-8'), level))
    if console:
        logger.addHandler(_mark(logging.StreamHandler(), level))
    logger.setLevel(level)
    logger.debug("Logging to %s at level %s", logfile, logging.getLevelName(level))
    return logfile


def shutdown_logging() -> None:
    """
    Detach and close the handlers installed by ``init_logging``, restoring the package logger's level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in _installed_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
