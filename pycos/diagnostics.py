"""Logging contexts and diagnostic handlers."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

__all__ = [
    "LogLevel",
    "LogContext",
    "default_log_context",
    "DiagnosticType",
    "Diagnostic",
    "DiagnosticHandler",
    "default_diagnostic_handler",
    "logger_diagnostic_handler",
]


class LogLevel(IntEnum):
    """Severity of a log message, and the threshold of a log context.

    A context lets through messages whose level is at or below its own.
    """

    NONE = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    TRACE = 5


LogFunc = Callable[["LogContext", LogLevel, str], None]


def _log_to_stdout(context: LogContext, message_level: LogLevel, message: str) -> None:
    names = {
        LogLevel.FATAL: "FATAL",
        LogLevel.ERROR: "ERROR",
        LogLevel.WARNING: "WARNING",
        LogLevel.INFO: "INFO",
        LogLevel.TRACE: "TRACE",
    }
    level_name = names.get(message_level, "UNKNOWN")
    sys.stdout.write(f"[{level_name}] {message}\n")


class LogContext:
    """Filters messages by level and hands the rest to a log function.

    The log function is called as ``log_func(context, level, message)``;
    by default it writes ``[LEVEL] message`` to standard output.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        log_func: LogFunc | None = None,
        user_data: Any = None,
    ) -> None:
        self.level = LogLevel(level)
        self.log_func: LogFunc = log_func if log_func is not None else _log_to_stdout
        self.user_data = user_data

    def log(self, message_level: LogLevel, fmt: str, *args: Any) -> None:
        """Log a printf-style message unless it is above the context's level."""
        if int(self.level) < int(message_level):
            return
        message = fmt % args if args else fmt
        self.log_func(self, LogLevel(message_level), message)


_DEFAULT_LOG_CONTEXT = LogContext(LogLevel.INFO, _log_to_stdout)


def default_log_context() -> LogContext:
    """Return the shared context that logs at INFO level to standard output."""
    return _DEFAULT_LOG_CONTEXT


class DiagnosticType(Enum):
    """Kind of a diagnostic."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A diagnostic message and its kind."""

    type: DiagnosticType
    message: str


HandleFunc = Callable[["DiagnosticHandler", Diagnostic], None]


class DiagnosticHandler:
    """Receives diagnostics and passes them to a handle function."""

    def __init__(self, handle_func: HandleFunc | None = None, user_data: Any = None) -> None:
        self.handle_func = handle_func
        self.user_data = user_data

    def emit(self, diagnostic: Diagnostic) -> None:
        """Hand a diagnostic to the handle function, if there is one."""
        if self.handle_func is not None:
            self.handle_func(self, diagnostic)

    def diagnose(self, diagnostic_type: DiagnosticType, message: str) -> None:
        """Build a diagnostic from a kind and a message and emit it."""
        self.emit(Diagnostic(DiagnosticType(diagnostic_type), message))


def _print_diagnostic(handler: DiagnosticHandler, diagnostic: Diagnostic) -> None:
    sys.stdout.write(f"{diagnostic.type.value}: {diagnostic.message}\n")


_DEFAULT_DIAGNOSTIC_HANDLER = DiagnosticHandler(_print_diagnostic)


def default_diagnostic_handler() -> DiagnosticHandler:
    """Return the shared handler that prints ``kind: message`` to standard output."""
    return _DEFAULT_DIAGNOSTIC_HANDLER


def _log_diagnostic(handler: DiagnosticHandler, diagnostic: Diagnostic) -> None:
    log_context = handler.user_data
    if log_context is None:
        return
    level = LogLevel.WARNING if diagnostic.type is DiagnosticType.WARNING else LogLevel.ERROR
    log_context.log(level, "Error")


def logger_diagnostic_handler(log_context: LogContext) -> DiagnosticHandler:
    """Return a handler that reports each diagnostic to ``log_context``.

    Warnings are logged at WARNING level and errors at ERROR level.
    """
    return DiagnosticHandler(_log_diagnostic, log_context)