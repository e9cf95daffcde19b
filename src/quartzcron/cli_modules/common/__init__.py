"""Shared CLI pieces: exit codes, option types and rich output."""

from quartzcron.cli_modules.common.errors import (
    CLIError,
    ConfigError,
    ErrorCode,
    InvalidExpressionsError,
    MissingFileError,
    UnreadableFileError,
    error_boundary,
    require_file,
)
from quartzcron.cli_modules.common.options import (
    ConfigOpt,
    FormatOpt,
    OutputFormat,
    StrictOpt,
    resolve_config,
)

__all__ = [
    "CLIError",
    "ConfigError",
    "ErrorCode",
    "InvalidExpressionsError",
    "MissingFileError",
    "UnreadableFileError",
    "error_boundary",
    "require_file",
    "ConfigOpt",
    "FormatOpt",
    "OutputFormat",
    "StrictOpt",
    "resolve_config",
]
