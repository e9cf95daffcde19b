"""quartzcron - Quartz-style cron expression parsing and validation."""

from quartzcron.builder import CronBuilder
from quartzcron.config import DEFAULT_CONFIG, ParserConfig
from quartzcron.errors import CronInternalError, CronParseError, ParseErrorKind
from quartzcron.expression import (
    CronExpression,
    ParseResult,
    SpecialMarkers,
    is_valid_expression,
    parse,
    try_parse,
    validate_expression,
)
from quartzcron.fields import CronFieldType, FieldConstraints, constraints_for
from quartzcron.fieldsets import FieldSet
from quartzcron.presets import PRESETS, get_preset, list_presets

# Batch validation over polars frames
from quartzcron import batch
from quartzcron.batch import validate_column, validate_file

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "parse",
    "try_parse",
    "validate_expression",
    "is_valid_expression",
    "CronExpression",
    "ParseResult",
    "SpecialMarkers",
    "FieldSet",
    # Fields
    "CronFieldType",
    "FieldConstraints",
    "constraints_for",
    # Errors
    "CronParseError",
    "CronInternalError",
    "ParseErrorKind",
    # Configuration
    "ParserConfig",
    "DEFAULT_CONFIG",
    # Builder and presets
    "CronBuilder",
    "PRESETS",
    "get_preset",
    "list_presets",
    # Batch
    "batch",
    "validate_column",
    "validate_file",
]
