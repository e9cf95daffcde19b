"""Validate command - Check one or more cron expressions.

This module implements the `quartzcron validate` command.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer

from quartzcron.cli_modules.common.errors import InvalidExpressionsError, error_boundary
from quartzcron.cli_modules.common.options import (
    ConfigOpt,
    FormatOpt,
    OutputFormat,
    resolve_config,
)
from quartzcron.expression import try_parse


@error_boundary
def validate_cmd(
    expressions: Annotated[
        list[str],
        typer.Argument(help="Cron expressions to validate (quote each one)"),
    ],
    format: FormatOpt = OutputFormat.CONSOLE,
    config_file: ConfigOpt = None,
) -> None:
    """Validate Quartz cron expressions.

    Exits with code 20 if any expression is invalid.

    Examples:
        quartzcron validate "0 0 12 * * ?"
        quartzcron validate "0 15 10 ? * MON-FRI" "0 0 * * * *"
        quartzcron validate "0 0 12 * * ?" --format json
    """
    config = resolve_config(config_file)
    results = [(text, try_parse(text, config)) for text in expressions]

    if format == OutputFormat.JSON:
        payload = [
            {
                "input": text,
                "valid": result.ok,
                "expression": str(result.expression) if result.ok else None,
                "error": None if result.ok else result.error.to_dict(),
            }
            for text, result in results
        ]
        typer.echo(json.dumps(payload, indent=2))
    else:
        for text, result in results:
            if result.ok:
                typer.echo(typer.style("VALID   ", fg="green") + str(result.expression))
            else:
                typer.echo(
                    typer.style("INVALID ", fg="red") + f"{text}: {result.error.message}"
                )

    messages = [str(result.error) for _, result in results if not result.ok]
    if messages:
        raise InvalidExpressionsError(len(messages), len(results), messages)
