"""Field types, bounds and name tables for Quartz-style cron expressions.

Everything in this module is immutable after import and shared by all
parse calls without locking.

    Field         Values            Special Characters
    ───────────────────────────────────────────────────
    Second        0-59              * / , -
    Minute        0-59              * / , -
    Hour          0-23              * / , -
    Day of Month  1-31              * / , - ? L W
    Month         1-12 or JAN-DEC   * / , -
    Day of Week   1-7 or SUN-SAT    * / , - ? L #
    Year          1970-MAX_YEAR     * / , -
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

# Year bounds; MAX_YEAR is fixed once per process.
MIN_YEAR = 1970
MAX_YEAR = date.today().year + 100


class CronFieldType(Enum):
    """Types of cron fields, in positional order."""

    SECOND = auto()
    MINUTE = auto()
    HOUR = auto()
    DAY_OF_MONTH = auto()
    MONTH = auto()
    DAY_OF_WEEK = auto()
    YEAR = auto()

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    CronFieldType.SECOND: "second",
    CronFieldType.MINUTE: "minute",
    CronFieldType.HOUR: "hour",
    CronFieldType.DAY_OF_MONTH: "day_of_month",
    CronFieldType.MONTH: "month",
    CronFieldType.DAY_OF_WEEK: "day_of_week",
    CronFieldType.YEAR: "year",
}

# Positional order used by the tokenizer cursor.
FIELD_ORDER: tuple[CronFieldType, ...] = tuple(CronFieldType)
REQUIRED_FIELDS = 6

MONTH_NAMES: Mapping[str, int] = MappingProxyType({
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4,
    "MAY": 5, "JUN": 6, "JUL": 7, "AUG": 8,
    "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
})

DAY_NAMES: Mapping[str, int] = MappingProxyType({
    "SUN": 1, "MON": 2, "TUE": 3, "WED": 4,
    "THU": 5, "FRI": 6, "SAT": 7,
})


@dataclass(frozen=True)
class FieldConstraints:
    """Constraints for a cron field.

    Attributes:
        min_value: Smallest legal value.
        max_value: Largest legal value (also the default range end).
        modulus: Wraparound modulus for ranges whose end precedes the start;
            ``None`` for fields that never wrap.
        max_increment: Largest legal ``/n`` step, ``None`` if unbounded.
        increment_label: Bound shown in increment errors ("Increment > 60").
        range_message: Error message for values outside the field range.
        names: Name to ordinal table for alphabetic literals.
        one_indexed: Whether a wrapped value of 0 maps back to ``modulus``.
        supports_last_day: ``L``, ``LW`` and ``L-n`` mean the last day of the month.
        supports_last_weekday: ``nL`` means the last such weekday; a bare ``L`` is 7.
        supports_w: ``nW`` means the nearest weekday.
        supports_hash: ``n#k`` means the k-th such weekday.
        supports_question: ``?`` is allowed.
    """

    min_value: int
    max_value: int
    modulus: int | None
    max_increment: int | None
    increment_label: int | None
    range_message: str
    names: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    one_indexed: bool = False
    supports_last_day: bool = False
    supports_last_weekday: bool = False
    supports_w: bool = False
    supports_hash: bool = False
    supports_question: bool = False

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


_SECOND_MINUTE_MESSAGE = "Minute and Second values must be between 0 and 59"

FIELD_CONSTRAINTS: Mapping[CronFieldType, FieldConstraints] = MappingProxyType({
    CronFieldType.SECOND: FieldConstraints(
        0, 59, 60, 59, 60, _SECOND_MINUTE_MESSAGE,
    ),
    CronFieldType.MINUTE: FieldConstraints(
        0, 59, 60, 59, 60, _SECOND_MINUTE_MESSAGE,
    ),
    CronFieldType.HOUR: FieldConstraints(
        0, 23, 24, 23, 24, "Hour values must be between 0 and 23",
    ),
    CronFieldType.DAY_OF_MONTH: FieldConstraints(
        1, 31, 31, 31, 31, "Day of month values must be between 1 and 31",
        one_indexed=True,
        supports_last_day=True,
        supports_w=True,
        supports_question=True,
    ),
    CronFieldType.MONTH: FieldConstraints(
        1, 12, 12, 12, 12, "Month values must be between 1 and 12",
        names=MONTH_NAMES,
        one_indexed=True,
    ),
    CronFieldType.DAY_OF_WEEK: FieldConstraints(
        1, 7, 7, 7, 7, "Day-of-Week values must be between 1 and 7",
        names=DAY_NAMES,
        one_indexed=True,
        supports_last_weekday=True,
        supports_hash=True,
        supports_question=True,
    ),
    CronFieldType.YEAR: FieldConstraints(
        MIN_YEAR, MAX_YEAR, None, None, None,
        f"Year values must be between {MIN_YEAR} and {MAX_YEAR}",
    ),
})


def constraints_for(field_type: CronFieldType) -> FieldConstraints:
    return FIELD_CONSTRAINTS[field_type]
