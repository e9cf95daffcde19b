"""Core CLI commands for quartzcron.

This package contains the CLI commands:
    - validate: Validate cron expressions
    - explain: Show the field sets of an expression
    - check: Validate a column of expressions in a data file
    - presets: List built-in presets
"""

import typer

from quartzcron.cli_modules.core.check import check_cmd
from quartzcron.cli_modules.core.explain import explain_cmd
from quartzcron.cli_modules.core.presets import presets_cmd
from quartzcron.cli_modules.core.validate import validate_cmd


def register_commands(parent_app: typer.Typer) -> None:
    """Register core commands with the parent app.

    Args:
        parent_app: Parent Typer app to register commands to
    """
    parent_app.command(name="validate")(validate_cmd)
    parent_app.command(name="explain")(explain_cmd)
    parent_app.command(name="check")(check_cmd)
    parent_app.command(name="presets")(presets_cmd)


__all__ = [
    "register_commands",
    "validate_cmd",
    "explain_cmd",
    "check_cmd",
    "presets_cmd",
]
