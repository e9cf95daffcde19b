"""Command-line interface for quartzcron."""

import logging
from typing import Annotated

import typer

from quartzcron.cli_modules import register_commands

app = typer.Typer(
    name="quartzcron",
    help="Parse and validate Quartz-style cron expressions",
    add_completion=False,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Parse and validate Quartz-style cron expressions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


register_commands(app)


if __name__ == "__main__":
    app()
