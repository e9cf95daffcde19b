"""Parsed cron expressions.

This module ties the tokenizer, field parser, validator and field-set builder
together into :func:`parse`, and defines the immutable result types.

Design Principles:
    1. Immutable expressions: safe to share between threads
    2. Atomic construction: a failed parse leaves nothing behind
    3. Round-trip: ``str(expr)`` is the upper-cased input text

Example:
    >>> expr = CronExpression.parse("0 15 10 ? * MON-FRI")
    >>> expr.hour.values
    (10,)
    >>> expr.day_of_week.values
    (2, 3, 4, 5, 6)
    >>> str(expr)
    '0 15 10 ? * MON-FRI'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from quartzcron.config import DEFAULT_CONFIG, ParserConfig
from quartzcron.errors import CronParseError
from quartzcron.fields import CronFieldType
from quartzcron.fieldsets import FieldSet
from quartzcron.parser import ExpressionState, parse_field
from quartzcron.tokenizer import normalize, tokenize
from quartzcron.validator import check_day_exclusivity

logger = logging.getLogger(__name__)


# =============================================================================
# Result Types
# =============================================================================


@dataclass(frozen=True)
class SpecialMarkers:
    """Day-level modifiers that do not fit in a plain value set.

    Attributes:
        nth_day_of_week: Occurrence (1-5) from a ``#n`` day-of-week atom.
        last_day_of_month: ``L`` on day-of-month.
        last_day_offset: Days before the end of the month from ``L-n``.
        nearest_weekday: ``W`` on day-of-month (``15W``, ``LW``).
        last_day_of_week: ``nL`` on day-of-week (last such weekday of the month).
    """

    nth_day_of_week: int | None = None
    last_day_of_month: bool = False
    last_day_offset: int = 0
    nearest_weekday: bool = False
    last_day_of_week: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "nth_day_of_week": self.nth_day_of_week,
            "last_day_of_month": self.last_day_of_month,
            "last_day_offset": self.last_day_offset,
            "nearest_weekday": self.nearest_weekday,
            "last_day_of_week": self.last_day_of_week,
        }


@dataclass(frozen=True)
class CronExpression:
    """A validated Quartz-style cron expression.

    Instances are only produced by :meth:`parse` (or :func:`parse`) and are
    immutable. Each field is a :class:`FieldSet` of permitted values.

    Attributes:
        expression: Normalized (upper-cased) expression text.
        second, minute, hour, day_of_month, month, day_of_week, year:
            Permitted values per field.
        markers: ``L``/``W``/``#`` modifiers.
    """

    expression: str
    second: FieldSet
    minute: FieldSet
    hour: FieldSet
    day_of_month: FieldSet
    month: FieldSet
    day_of_week: FieldSet
    year: FieldSet
    markers: SpecialMarkers = SpecialMarkers()

    @classmethod
    def parse(cls, expression: str, config: ParserConfig | None = None) -> "CronExpression":
        """Parse a cron expression.

        Args:
            expression: Cron expression string.
            config: Parser options (defaults to :data:`DEFAULT_CONFIG`).

        Returns:
            Parsed CronExpression.

        Raises:
            CronParseError: If expression is invalid.
            TypeError: If expression is None or not a string.
        """
        return parse(expression, config)

    @property
    def fields(self) -> tuple[FieldSet, ...]:
        """Field sets in positional order."""
        return (
            self.second,
            self.minute,
            self.hour,
            self.day_of_month,
            self.month,
            self.day_of_week,
            self.year,
        )

    def get_field(self, field_type: CronFieldType) -> FieldSet:
        """Get a specific field by type."""
        return self.fields[field_type.value - 1]

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"expression": self.expression}
        for field_set in self.fields:
            data[field_set.field_type.label] = field_set.to_dict()
        data["markers"] = self.markers.to_dict()
        return data

    def __str__(self) -> str:
        return self.expression

    def __repr__(self) -> str:
        return f"CronExpression({self.expression!r})"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of :func:`try_parse`: exactly one of ``expression``/``error``."""

    expression: CronExpression | None = None
    error: CronParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> CronExpression:
        """Return the expression or raise the stored error."""
        if self.error is not None:
            raise self.error
        assert self.expression is not None
        return self.expression

    def __bool__(self) -> bool:
        return self.ok


# =============================================================================
# Parsing
# =============================================================================


def _freeze(expression: str, state: ExpressionState) -> CronExpression:
    fields = {ft: acc.freeze() for ft, acc in state.fields.items()}
    check_day_exclusivity(
        fields[CronFieldType.DAY_OF_MONTH],
        fields[CronFieldType.DAY_OF_WEEK],
    )
    return CronExpression(
        expression=expression,
        second=fields[CronFieldType.SECOND],
        minute=fields[CronFieldType.MINUTE],
        hour=fields[CronFieldType.HOUR],
        day_of_month=fields[CronFieldType.DAY_OF_MONTH],
        month=fields[CronFieldType.MONTH],
        day_of_week=fields[CronFieldType.DAY_OF_WEEK],
        year=fields[CronFieldType.YEAR],
        markers=SpecialMarkers(
            nth_day_of_week=state.nth_day_of_week,
            last_day_of_month=state.last_day_of_month,
            last_day_offset=state.last_day_offset,
            nearest_weekday=state.nearest_weekday,
            last_day_of_week=state.last_day_of_week,
        ),
    )


def parse(expression: str, config: ParserConfig | None = None) -> CronExpression:
    """Parse and validate a cron expression.

    Args:
        expression: Six or seven whitespace-separated fields.
        config: Parser options (defaults to :data:`DEFAULT_CONFIG`).

    Returns:
        Parsed CronExpression.

    Raises:
        CronParseError: If the expression is invalid.
        TypeError: If expression is None or not a string.
    """
    config = config or DEFAULT_CONFIG
    normalized = normalize(expression)

    try:
        tokens = tokenize(normalized, config)
        state = ExpressionState()
        for token in tokens:
            parse_field(token, state)
        if len(tokens) < len(CronFieldType):
            state.accumulator(CronFieldType.YEAR).add_wildcard()
        result = _freeze(normalized, state)
    except CronParseError as e:
        if e.expression:
            raise
        raise e.with_context(normalized) from None

    logger.debug("Parsed cron expression %r", normalized)
    return result


def try_parse(expression: str, config: ParserConfig | None = None) -> ParseResult:
    """Parse without raising on invalid input.

    Returns:
        ParseResult holding the expression or the parse error.
    """
    try:
        return ParseResult(expression=parse(expression, config))
    except CronParseError as e:
        logger.debug("Rejected cron expression %r: %s", expression, e)
        return ParseResult(error=e)


# =============================================================================
# Validation Functions
# =============================================================================


def validate_expression(expression: str, config: ParserConfig | None = None) -> list[str]:
    """Validate a cron expression.

    Args:
        expression: Cron expression to validate.
        config: Parser options.

    Returns:
        List of validation errors (empty if valid).
    """
    result = try_parse(expression, config)
    return [] if result.ok else [str(result.error)]


def is_valid_expression(expression: str, config: ParserConfig | None = None) -> bool:
    """Check if a cron expression is valid.

    Args:
        expression: Cron expression to check.
        config: Parser options.

    Returns:
        True if valid.
    """
    return try_parse(expression, config).ok
