"""Validation rules for cron fields.

Value and increment checks run per atom while the field parser works;
combination checks run once per field before its atoms are read; the
day-of-month / day-of-week exclusivity rule runs after all fields are parsed.
"""

from __future__ import annotations

from quartzcron.errors import CronParseError, ParseErrorKind
from quartzcron.fields import CronFieldType, FIELD_CONSTRAINTS
from quartzcron.fieldsets import FieldSet


def check_value(
    field_type: CronFieldType,
    value: int,
    end: int | None = None,
    position: int = -1,
) -> None:
    """Check a value (and optional range end) against the field's bounds.

    Years have no modulus, so a year range ending before its start is
    rejected here rather than reaching :func:`~quartzcron.fieldsets.expand`.

    Raises:
        CronParseError: INVALID_NUMERIC_VALUE if out of range.
    """
    constraints = FIELD_CONSTRAINTS[field_type]
    if constraints.modulus is None and end is not None and end < value:
        raise CronParseError(
            "Start year must be less than stop year",
            ParseErrorKind.INVALID_NUMERIC_VALUE,
            position=position,
        )
    invalid = not constraints.contains(value) or (
        end is not None and end > constraints.max_value
    )
    if invalid:
        raise CronParseError(
            constraints.range_message,
            ParseErrorKind.INVALID_NUMERIC_VALUE,
            position=position,
        )


def check_increment(field_type: CronFieldType, increment: int, position: int = -1) -> None:
    """Check a ``/n`` step against the field's maximum increment.

    Raises:
        CronParseError: INCREMENT_OUT_OF_RANGE if the step is zero or too large.
    """
    if increment <= 0:
        raise CronParseError(
            f"Increment must be greater than 0 : {increment}",
            ParseErrorKind.INCREMENT_OUT_OF_RANGE,
            position=position,
        )
    constraints = FIELD_CONSTRAINTS[field_type]
    if constraints.max_increment is not None and increment > constraints.max_increment:
        raise CronParseError(
            f"Increment > {constraints.increment_label} : {increment}",
            ParseErrorKind.INCREMENT_OUT_OF_RANGE,
            position=position,
        )


def check_field_combinations(field_type: CronFieldType, text: str, position: int = -1) -> None:
    """Reject ``L`` and ``#`` combined with lists in the day fields.

    Raises:
        CronParseError: UNSUPPORTED_COMBINATION.
    """
    if field_type == CronFieldType.DAY_OF_MONTH:
        if "L" in text and len(text) > 1 and "," in text:
            raise CronParseError(
                "Support for specifying 'L' and 'LW' with other days of the "
                "month is not implemented",
                ParseErrorKind.UNSUPPORTED_COMBINATION,
                position=position,
            )
    elif field_type == CronFieldType.DAY_OF_WEEK:
        if "L" in text and len(text) > 1 and "," in text:
            raise CronParseError(
                "Support for specifying 'L' with other days of the week is not implemented",
                ParseErrorKind.UNSUPPORTED_COMBINATION,
                position=position,
            )
        hashes = text.count("#")
        if hashes > 1:
            raise CronParseError(
                'Support for specifying multiple "nth" days is not implemented.',
                ParseErrorKind.UNSUPPORTED_COMBINATION,
                position=position + text.index("#", text.index("#") + 1),
            )
        if hashes == 1 and "," in text:
            raise CronParseError(
                "Support for specifying '#' with other days of the week is not implemented",
                ParseErrorKind.UNSUPPORTED_COMBINATION,
                position=position,
            )


def check_day_exclusivity(day_of_month: FieldSet, day_of_week: FieldSet) -> None:
    """Require exactly one of day-of-month and day-of-week to be ``?``.

    Raises:
        CronParseError: EXCLUSIVITY_VIOLATION.
    """
    if day_of_month.is_unspecified and day_of_week.is_unspecified:
        raise CronParseError(
            "'?' can only be specified for Day-of-Month -OR- Day-of-Week.",
            ParseErrorKind.EXCLUSIVITY_VIOLATION,
        )
    if day_of_month.is_constrained and day_of_week.is_constrained:
        raise CronParseError(
            "Support for specifying both a day-of-week AND a day-of-month "
            "parameter is not implemented.",
            ParseErrorKind.EXCLUSIVITY_VIOLATION,
            position=0,
        )
