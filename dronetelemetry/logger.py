"""Thread-safe application logger writing to a timestamped file and the console."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO, Union

__all__ = ["LogLevel", "Logger", "get_logger"]


class LogLevel(Enum):
    """Severity of a log message."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


def _console(text: str) -> None:
    print(text, file=sys.stderr, flush=True)


def _default_log_dir() -> Path:
    """The ``logs`` directory beside the running program, or in the working directory."""
    program = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if program is not None and program.is_file():
        return program.resolve().parent / "logs"
    return Path.cwd() / "logs"


class Logger:
    """Writes each message to a log file (when one could be opened) and to stderr."""

    def __init__(self, log_dir: Union[str, Path, None] = None) -> None:
        self._lock = threading.Lock()
        self._file: Optional[TextIO] = None
        self.path: Optional[Path] = None

        directory = Path(log_dir) if log_dir is not None else _default_log_dir()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError:
            _console(f"Failed to create log directory: {directory}")
            return

        stamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        path = directory / f"drone_telemetry_{stamp}.log"
        try:
            self._file = path.open("w", encoding="utf-8")
        except OSError as exc:
            _console(f"Failed to open log file: {path}")
            _console(f"Error: {exc}")
            return
        self.path = path

    @property
    def is_file_open(self) -> bool:
        """Whether messages are also being written to a file."""
        return self._file is not None and not self._file.closed

    def log(self, level: LogLevel, message: str) -> None:
        """Record ``message`` at ``level``."""
        with self._lock:
            now = datetime.now()
            timestamp = now.strftime("%Y-%m-%d %H:%M:%S.") + f"{now.microsecond // 1000:03d}"
            line = f"[{timestamp}] [{level}] {message}"
            if self.is_file_open:
                try:
                    self._file.write(line + "\n")
                    self._file.flush()
                except OSError as exc:
                    _console(f"Logging failed: {exc}")
            _console(line)

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def close(self) -> None:
        """Close the log file; console logging continues."""
        with self._lock:
            if self._file is not None and not self._file.closed:
                self._file.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


_instance: Optional[Logger] = None
_instance_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the shared application logger, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = Logger()
        return _instance