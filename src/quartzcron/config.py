"""Parser configuration.

Example:
    >>> from quartzcron.config import ParserConfig
    >>> config = ParserConfig(reject_extra_fields=True)
    >>> config = ParserConfig.from_env()            # QUARTZCRON_* variables
    >>> config = ParserConfig.from_file("cron.yaml")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ParserConfig:
    """Options controlling how lenient the parser is.

    Attributes:
        reject_extra_fields: Treat tokens after the year field as an error
            instead of ignoring them.
        max_expression_length: Longest accepted input, in characters.
    """

    reject_extra_fields: bool = False
    max_expression_length: int = 1024

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a value is out of range.
        """
        if self.max_expression_length <= 0:
            raise ValueError(
                f"max_expression_length must be positive, got {self.max_expression_length}"
            )

    def with_overrides(self, **kwargs: Any) -> "ParserConfig":
        """Create new config with overrides."""
        data = self.to_dict()
        data.update(kwargs)
        return ParserConfig.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "reject_extra_fields": self.reject_extra_fields,
            "max_expression_length": self.max_expression_length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ParserConfig":
        """Create from dictionary, ignoring unknown keys."""
        return cls(
            reject_extra_fields=bool(data.get("reject_extra_fields", False)),
            max_expression_length=int(data.get("max_expression_length", 1024)),
        )

    @classmethod
    def from_env(cls, prefix: str = "QUARTZCRON_") -> "ParserConfig":
        """Create configuration from environment variables.

        Environment variables:
            {prefix}REJECT_EXTRA_FIELDS: true/false
            {prefix}MAX_EXPRESSION_LENGTH: Positive integer

        Args:
            prefix: Environment variable prefix

        Returns:
            Configured instance
        """
        config = cls()

        if val := os.environ.get(f"{prefix}REJECT_EXTRA_FIELDS"):
            config = config.with_overrides(
                reject_extra_fields=val.strip().lower() in _TRUE_VALUES
            )

        if val := os.environ.get(f"{prefix}MAX_EXPRESSION_LENGTH"):
            try:
                length = int(val)
            except ValueError:
                raise ValueError(
                    f"Invalid {prefix}MAX_EXPRESSION_LENGTH: {val!r}. Must be an integer"
                )
            config = config.with_overrides(max_expression_length=length)

        return config

    @classmethod
    def from_file(cls, path: str | Path) -> "ParserConfig":
        """Load configuration from a YAML file.

        The settings may sit at the top level or under a ``quartzcron`` key.

        Raises:
            ValueError: If the file does not contain a mapping.
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {path} must be a mapping")
        section = data.get("quartzcron", data)
        if not isinstance(section, dict):
            raise ValueError(f"'quartzcron' section in {path} must be a mapping")
        return cls.from_dict(section)


DEFAULT_CONFIG = ParserConfig()
