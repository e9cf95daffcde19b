"""Reusable CLI options and arguments."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from quartzcron.cli_modules.common.errors import ConfigError, require_file
from quartzcron.config import ParserConfig


class OutputFormat(str, Enum):
    """Supported output formats."""

    CONSOLE = "console"
    JSON = "json"


FormatOpt = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format (console, json)"),
]

ConfigOpt = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="YAML file with parser settings"),
]

StrictOpt = Annotated[
    bool,
    typer.Option("--strict", help="Exit with code 20 if invalid expressions are found"),
]


def resolve_config(path: Path | None) -> ParserConfig:
    """Load parser settings from ``path``, or from the environment if omitted.

    Raises:
        ConfigError: If the settings cannot be parsed into a config.
    """
    if path is None:
        try:
            return ParserConfig.from_env()
        except ValueError as e:
            raise ConfigError(str(e))

    require_file(path)
    try:
        return ParserConfig.from_file(path)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid configuration: {e}", source=path)
