"""Presets command - List the built-in cron expression presets."""

from __future__ import annotations

import json

import typer
from rich.console import Console

from quartzcron.cli_modules.common.errors import error_boundary
from quartzcron.cli_modules.common.options import FormatOpt, OutputFormat
from quartzcron.cli_modules.common.output import print_presets
from quartzcron.presets import PRESETS


@error_boundary
def presets_cmd(format: FormatOpt = OutputFormat.CONSOLE) -> None:
    """List built-in presets and their expressions."""
    if format == OutputFormat.JSON:
        typer.echo(json.dumps({name: str(expr) for name, expr in PRESETS.items()}, indent=2))
    else:
        print_presets(Console(), PRESETS.items())
