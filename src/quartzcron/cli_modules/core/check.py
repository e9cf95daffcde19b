"""Check command - Validate a column of cron expressions in a data file.

This module implements the `quartzcron check` command.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Optional

import polars as pl
import typer
from rich.console import Console

from quartzcron.batch import SUPPORTED_EXTENSIONS, summarize, validate_file
from quartzcron.cli_modules.common.errors import (
    CLIError,
    ErrorCode,
    InvalidExpressionsError,
    UnreadableFileError,
    error_boundary,
    require_file,
)
from quartzcron.cli_modules.common.options import (
    FormatOpt,
    OutputFormat,
    StrictOpt,
    resolve_config,
)
from quartzcron.cli_modules.common.output import print_summary


@error_boundary
def check_cmd(
    file: Annotated[
        Path,
        typer.Argument(help="Path to the data file (csv, json, parquet, ndjson)"),
    ],
    column: Annotated[
        str,
        typer.Option("--column", "-c", help="Column holding the cron expressions"),
    ] = "schedule",
    format: FormatOpt = OutputFormat.CONSOLE,
    strict: StrictOpt = False,
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", help="YAML file with parser settings"),
    ] = None,
) -> None:
    """Validate every cron expression in a column of a data file.

    Examples:
        quartzcron check jobs.csv
        quartzcron check jobs.parquet --column cron --strict
        quartzcron check jobs.csv --format json
    """
    require_file(file)
    if file.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise UnreadableFileError(
            file, f"unsupported extension '{file.suffix}'"
        )

    config = resolve_config(config_file)
    try:
        validated = validate_file(file, column, config)
    except pl.exceptions.PolarsError as e:
        raise UnreadableFileError(file, str(e))
    except ValueError as e:
        raise CLIError(str(e), code=ErrorCode.USAGE_ERROR)

    summary = summarize(validated)
    invalid_rows = (
        validated.with_row_index("row")
        .filter(~pl.col("is_valid"))
        .select(
            "row",
            pl.col(column).alias("expression"),
            "error_kind",
            "error",
        )
        .to_dicts()
    )

    if format == OutputFormat.JSON:
        typer.echo(json.dumps({"summary": summary, "invalid": invalid_rows}, indent=2))
    else:
        print_summary(Console(), summary, invalid_rows)

    if strict and summary["invalid"]:
        raise InvalidExpressionsError(summary["invalid"], summary["total"])
