"""File and console logging with severity levels, plus engine assertions."""

from __future__ import annotations

import inspect
import sys
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Callable, Dict, Optional, Union

GAME_LOG_FILE = "game.log"
DATE_FORMAT = "%y-%m-%d %H:%M:%S"


class LogLevel(IntEnum):
    """Severity of a log message; lower values are more severe."""

    FATAL = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


_LABELS = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO ",
    LogLevel.WARNING: "WARN ",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}


class AssertionFailure(AssertionError):
    """Raised when an engine assertion does not hold."""


def level_label(level: Union[LogLevel, int]) -> str:
    """Return the five-character label written for a level."""
    return _LABELS[LogLevel(level)]


def _default_console(message: str, level: LogLevel) -> None:
    sys.stdout.write(message)


def _default_clock() -> str:
    return datetime.now().strftime(DATE_FORMAT)


class Log:
    """Writes timestamped, labelled lines to a file and to a console sink."""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = GAME_LOG_FILE,
        console: Optional[Callable[[str, LogLevel], None]] = None,
        clock: Optional[Callable[[], str]] = None,
        reporting_level: Union[LogLevel, int] = LogLevel.TRACE,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.console = console if console is not None else _default_console
        self.clock = clock if clock is not None else _default_clock
        self.reporting_level = LogLevel(reporting_level)

    def restart(self) -> None:
        """Empty the log file."""
        if self.path is not None:
            self.path.write_text("", encoding="utf-8")

    def write(self, level: Union[LogLevel, int], message: str) -> Optional[str]:
        """Log a message; return the written line, or None if filtered out."""
        level = LogLevel(level)
        if level > self.reporting_level:
            return None
        line = f"{self.clock()} {level_label(level)}: \t{message}\n"
        if self.path is not None:
            try:
                with self.path.open("a", encoding="utf-8") as handle:
                    handle.write(line)
            except OSError:
                pass
        self.console(line, level)
        return line


_current: Dict[str, Log] = {}


def set_logger(logger: Optional[Log]) -> Optional[Log]:
    """Install the process-wide logger and return the previous one."""
    previous = _current.pop("logger", None)
    if logger is not None:
        _current["logger"] = logger
    return previous


def get_logger() -> Log:
    """Return the process-wide logger, creating the default one if needed."""
    logger = _current.get("logger")
    if logger is None:
        logger = Log()
        _current["logger"] = logger
    return logger


def log(level: Union[LogLevel, int], message: str) -> Optional[str]:
    """Log a message through the process-wide logger."""
    return get_logger().write(level, message)


def report_assertion_failure(
    expression: str, message: str, code_file: str, code_line: int
) -> None:
    """Log a fatal message describing a failed assertion."""
    log(
        LogLevel.FATAL,
        f"Assertion failure: {expression} , message: {message} "
        f", in file {code_file} line {code_line}",
    )


def gassert(condition: object, expression: str = "", message: str = "") -> None:
    """Report and raise AssertionFailure when the condition is false."""
    if condition:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    code_file = caller.f_code.co_filename if caller is not None else "<unknown>"
    code_line = caller.f_lineno if caller is not None else 0
    del frame, caller
    report_assertion_failure(expression, message, code_file, code_line)
    raise AssertionFailure(f"{expression}: {message}" if message else expression)