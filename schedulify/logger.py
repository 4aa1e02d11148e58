"""Timestamped file logging shared by the whole application."""

from __future__ import annotations

import threading
from datetime import datetime
from enum import Enum
from pathlib import Path

DEFAULT_LOG_DIR = Path("..") / "data" / "logs"

_TIMESTAMP_FORMAT = "%d%m%y_%H-%M-%S"


class LogLevel(Enum):
    """Severity of a log record, carrying its fixed-width label."""

    INFO = "[INFO   ] "
    ERROR = "[ERROR  ] "
    WARNING = "[WARNING] "

    @property
    def label(self) -> str:
        return self.value


def timestamp() -> str:
    """Return the current local time formatted as ddmmyy_HH-MM-SS."""
    return datetime.now().strftime(_TIMESTAMP_FORMAT)


def timestamped_log_path(log_dir: str | Path = DEFAULT_LOG_DIR) -> Path:
    """Return a log file path inside log_dir named after the current time."""
    return Path(log_dir) / f"{timestamp()}.log"


def create_log_file(path: str | Path) -> None:
    """Create (or truncate) the log file, making its directory if needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")


def append_to_log_file(log_path: str | Path, message: str) -> None:
    """Append a timestamped line to the log file; failures to open are ignored."""
    line = f"{timestamp()}: {message}\n"
    try:
        with open(log_path, "a", encoding="utf-8") as out:
            out.write(line)
    except OSError:
        pass


class Logger:
    """Thread-safe logger writing to one timestamped file."""

    def __init__(self) -> None:
        self._log_path: Path | None = None
        self._lock = threading.Lock()

    def initialize(self, log_dir: str | Path = DEFAULT_LOG_DIR) -> None:
        """Choose a fresh timestamped log file in log_dir and create it."""
        self._log_path = timestamped_log_path(log_dir)
        create_log_file(self._log_path)

    @property
    def log_path(self) -> Path | None:
        """The current log file, or None before initialization."""
        return self._log_path

    def log(self, message: str, level: LogLevel | None = None) -> None:
        """Write a message, prefixed with the level label when one is given."""
        if level is not None:
            message = level.label + message
        with self._lock:
            if self._log_path is None:
                return
            append_to_log_file(self._log_path, message)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def error(self, message: str) -> None:
        self.log(message, LogLevel.ERROR)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING)


_instance = Logger()


def get_logger() -> Logger:
    """Return the process-wide logger."""
    return _instance