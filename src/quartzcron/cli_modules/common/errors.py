"""CLI failures and their exit codes.

Commands raise :class:`CLIError` subclasses; :func:`error_boundary` turns
them into a red message on stderr and a process exit code.
"""

from __future__ import annotations

import functools
import logging
from enum import IntEnum
from pathlib import Path
from typing import Any, Callable, TypeVar

import typer

logger = logging.getLogger(__name__)


class ErrorCode(IntEnum):
    """Process exit codes."""

    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    FILE_NOT_FOUND = 10
    INVALID_FILE_FORMAT = 13
    VALIDATION_FAILED = 20
    CONFIG_INVALID = 31


# =============================================================================
# Exceptions
# =============================================================================


class CLIError(Exception):
    """A failure the CLI reports without a traceback."""

    code = ErrorCode.GENERAL_ERROR

    def __init__(self, message: str, hint: str | None = None, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class MissingFileError(CLIError):
    code = ErrorCode.FILE_NOT_FOUND

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            f"File not found: {path}",
            hint="Check that the file exists and the path is correct.",
        )
        self.path = Path(path)


class UnreadableFileError(CLIError):
    """The data file exists but cannot be loaded into a frame."""

    code = ErrorCode.INVALID_FILE_FORMAT

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(
            f"Cannot read {path}: {reason}",
            hint="Supported formats are csv, json, parquet and ndjson.",
        )
        self.path = Path(path)


class InvalidExpressionsError(CLIError):
    """One or more cron expressions failed to parse."""

    code = ErrorCode.VALIDATION_FAILED

    def __init__(self, invalid: int, total: int, messages: list[str] | None = None) -> None:
        noun = "expression is" if total == 1 else "expressions are"
        super().__init__(f"{invalid} of {total} {noun} invalid")
        self.invalid = invalid
        self.total = total
        self.messages = messages or []


class ConfigError(CLIError):
    code = ErrorCode.CONFIG_INVALID

    def __init__(self, message: str, source: Path | str | None = None) -> None:
        hint = (
            f"Check the settings in {source}."
            if source
            else "Check the QUARTZCRON_* environment variables."
        )
        super().__init__(message, hint=hint)
        self.source = source


# =============================================================================
# Boundary
# =============================================================================


F = TypeVar("F", bound=Callable[..., Any])


def _report(error: CLIError) -> None:
    typer.secho(f"Error: {error.message}", fg="red", err=True)
    if error.hint:
        typer.secho(f"Hint: {error.hint}", fg="yellow", err=True)


def error_boundary(func: F) -> F:
    """Convert exceptions escaping a command into exit codes.

    ``CLIError`` exits with its own code; anything else is logged with its
    traceback and exits with ``GENERAL_ERROR``.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except CLIError as e:
            _report(e)
            raise typer.Exit(int(e.code))
        except Exception as e:
            logger.exception("Unhandled error in %s", func.__name__)
            _report(CLIError(str(e)))
            raise typer.Exit(int(ErrorCode.GENERAL_ERROR))

    return wrapper  # type: ignore


def require_file(path: Path) -> Path:
    """Return ``path`` if it exists, else raise :class:`MissingFileError`."""
    if not path.exists():
        raise MissingFileError(path)
    return path
