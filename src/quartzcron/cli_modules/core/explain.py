"""Explain command - Show the field sets of a cron expression.

This module implements the `quartzcron explain` command.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.console import Console

from quartzcron.cli_modules.common.errors import CLIError, ErrorCode, error_boundary
from quartzcron.cli_modules.common.options import (
    ConfigOpt,
    FormatOpt,
    OutputFormat,
    resolve_config,
)
from quartzcron.cli_modules.common.output import print_expression
from quartzcron.expression import try_parse


@error_boundary
def explain_cmd(
    expression: Annotated[
        str,
        typer.Argument(help="Cron expression to explain (quoted)"),
    ],
    format: FormatOpt = OutputFormat.CONSOLE,
    config_file: ConfigOpt = None,
) -> None:
    """Show the values each field of a cron expression permits.

    Examples:
        quartzcron explain "0 0/15 9-17 ? * MON-FRI"
        quartzcron explain "0 0 18 LW * ?" --format json
    """
    config = resolve_config(config_file)
    result = try_parse(expression, config)
    if not result.ok:
        raise CLIError(
            f"Invalid cron expression: {result.error.message}",
            code=ErrorCode.VALIDATION_FAILED,
        )

    if format == OutputFormat.JSON:
        typer.echo(json.dumps(result.expression.to_dict(), indent=2))
    else:
        print_expression(Console(), result.expression)
