"""Logger set-up with a console sink and rotating log files."""

from __future__ import annotations

import logging
import sys
import time
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Tuple, Union

from tailorsim.errors import ExitCode, TailorError

TRACE = 5
OFF = logging.CRITICAL + 10
logging.addLevelName(TRACE, "TRACE")

_LEVELS = {
    0: TRACE,
    1: logging.DEBUG,
    2: logging.INFO,
    3: logging.WARNING,
    4: logging.ERROR,
    5: logging.CRITICAL,
    6: OFF,
}

LOGGER_NAME_PREFIX = "tailorsim_"
MAX_FILE_BYTES = 512 * 1024 * 1024
MAX_FILES = 1000
LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(filename)s::%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parts(moment) -> Tuple[int, int, int, int, int, int]:
    """Year, month, day, hour, minute and second of a datetime or struct_time."""
    if isinstance(moment, time.struct_time):
        return (
            moment.tm_year,
            moment.tm_mon,
            moment.tm_mday,
            moment.tm_hour,
            moment.tm_min,
            moment.tm_sec,
        )
    return (
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
    )


def to_date_int(moment) -> int:
    """The date of a datetime or struct_time as YYYYMMDD."""
    year, month, day, *_ = _parts(moment)
    return year * 10000 + month * 100 + day


def to_time_int(moment) -> int:
    """The time of a datetime or struct_time as HHMMSS."""
    *_, hour, minute, second = _parts(moment)
    return hour * 10000 + minute * 100 + second


def now_date_time_ints() -> Tuple[int, int]:
    """The current local date and time as (YYYYMMDD, HHMMSS)."""
    now = datetime.now()
    return to_date_int(now), to_time_int(now)


def switch_log_level(logger: logging.Logger, level: int) -> None:
    """Set a level given on the 0 (trace) .. 6 (off) scale."""
    try:
        logger.setLevel(_LEVELS[level])
    except (KeyError, TypeError):
        raise ValueError(f"invalid log level: {level!r}") from None


def create_logger(log_dir: Union[str, Path], level: int = 0) -> logging.Logger:
    """Create a timestamped logger writing to stdout and to ``log_dir``."""
    date, clock = now_date_time_ints()
    name = f"{LOGGER_NAME_PREFIX}{date}_{clock}"
    logger = logging.Logger(name)
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    try:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            directory / f"{name}.log",
            maxBytes=MAX_FILE_BYTES,
            backupCount=MAX_FILES,
            encoding="utf-8",
        )
    except OSError as exc:
        raise TailorError(
            ExitCode.LOGGER_INITIALIZATION_FAILED, f"Log initialization failed: {exc}"
        ) from exc
    console_handler = logging.StreamHandler(sys.stdout)
    for handler in (console_handler, file_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    switch_log_level(logger, level)
    return logger