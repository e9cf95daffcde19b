"""Fluent construction of Quartz cron expressions.

Day-of-month and day-of-week are set as a pair: choosing one always resets
the other to ``?``, so a built expression never trips the exclusivity rule.

    >>> expr = (CronBuilder()
    ...     .at_minute(0, 30)
    ...     .at_hour(9, 17)
    ...     .on_weekdays()
    ...     .build())
    >>> str(expr)
    '0 0,30 9,17 ? * MON-FRI'
"""

from __future__ import annotations

from quartzcron.config import ParserConfig
from quartzcron.expression import CronExpression, parse
from quartzcron.fields import CronFieldType

_DEFAULTS = {
    CronFieldType.SECOND: "0",
    CronFieldType.MINUTE: "*",
    CronFieldType.HOUR: "*",
    CronFieldType.DAY_OF_MONTH: "*",
    CronFieldType.MONTH: "*",
    CronFieldType.DAY_OF_WEEK: "?",
}


def _atoms(values: tuple[int | str, ...]) -> str:
    if not values:
        raise ValueError("at least one value is required")
    return ",".join(str(v).upper() for v in values)


class CronBuilder:
    """Accumulates field text and parses it on :meth:`build`.

    Every setter returns the builder. Nothing is validated until
    :meth:`build`, which raises :class:`~quartzcron.errors.CronParseError`
    for out-of-range values.
    """

    def __init__(self) -> None:
        self._fields: dict[CronFieldType, str] = dict(_DEFAULTS)

    def _set(self, field_type: CronFieldType, text: str) -> "CronBuilder":
        self._fields[field_type] = text
        return self

    def _set_days(self, day_of_month: str, day_of_week: str) -> "CronBuilder":
        self._fields[CronFieldType.DAY_OF_MONTH] = day_of_month
        self._fields[CronFieldType.DAY_OF_WEEK] = day_of_week
        return self

    # -- time of day --------------------------------------------------------

    def at_second(self, *seconds: int) -> "CronBuilder":
        return self._set(CronFieldType.SECOND, _atoms(seconds))

    def at_minute(self, *minutes: int) -> "CronBuilder":
        return self._set(CronFieldType.MINUTE, _atoms(minutes))

    def at_hour(self, *hours: int) -> "CronBuilder":
        return self._set(CronFieldType.HOUR, _atoms(hours))

    def at_time(self, hour: int, minute: int = 0, second: int = 0) -> "CronBuilder":
        """Fire once a day at ``hour:minute:second``."""
        self._set(CronFieldType.SECOND, str(second))
        self._set(CronFieldType.MINUTE, str(minute))
        return self._set(CronFieldType.HOUR, str(hour))

    def every_seconds(self, step: int, start: int = 0) -> "CronBuilder":
        return self._set(CronFieldType.SECOND, f"{start}/{step}")

    def every_minutes(self, step: int, start: int = 0) -> "CronBuilder":
        return self._set(CronFieldType.MINUTE, f"{start}/{step}")

    def every_hours(self, step: int, start: int = 0) -> "CronBuilder":
        """Fire every ``step`` hours from ``start``, on minute 0."""
        self._set(CronFieldType.MINUTE, "0")
        return self._set(CronFieldType.HOUR, f"{start}/{step}")

    # -- calendar -----------------------------------------------------------

    def every_day(self) -> "CronBuilder":
        return self._set_days("*", "?")

    def on_days_of_month(self, *days: int) -> "CronBuilder":
        return self._set_days(_atoms(days), "?")

    def on_last_day_of_month(self, offset: int = 0) -> "CronBuilder":
        """Fire on the last day of the month, or ``offset`` days before it."""
        return self._set_days(f"L-{offset}" if offset else "L", "?")

    def on_nearest_weekday(self, day: int) -> "CronBuilder":
        """Fire on the Monday-Friday closest to ``day`` (``15W``)."""
        return self._set_days(f"{day}W", "?")

    def on_days_of_week(self, *days: int | str) -> "CronBuilder":
        """Fire on the given weekdays, as numbers (SUN=1) or names."""
        return self._set_days("?", _atoms(days))

    def on_weekdays(self) -> "CronBuilder":
        return self.on_days_of_week("MON-FRI")

    def on_weekends(self) -> "CronBuilder":
        return self.on_days_of_week("SAT", "SUN")

    def on_nth_day_of_week(self, day: int | str, nth: int) -> "CronBuilder":
        """Fire on the ``nth`` (1-5) such weekday of the month (``MON#2``)."""
        return self.on_days_of_week(f"{day}#{nth}")

    def on_last_day_of_week(self, day: int | str) -> "CronBuilder":
        """Fire on the last such weekday of the month (``6L``)."""
        return self.on_days_of_week(f"{day}L")

    def in_months(self, *months: int | str) -> "CronBuilder":
        return self._set(CronFieldType.MONTH, _atoms(months))

    def in_years(self, *years: int) -> "CronBuilder":
        """Add the optional year field."""
        return self._set(CronFieldType.YEAR, _atoms(years))

    # -- output -------------------------------------------------------------

    def to_string(self) -> str:
        return " ".join(
            self._fields[field_type]
            for field_type in CronFieldType
            if field_type in self._fields
        )

    def build(self, config: ParserConfig | None = None) -> CronExpression:
        """Parse the accumulated fields into a :class:`CronExpression`."""
        return parse(self.to_string(), config)
