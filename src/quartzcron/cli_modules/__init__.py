"""Modular CLI commands for quartzcron."""

from quartzcron.cli_modules.core import register_commands

__all__ = ["register_commands"]
