"""Named Quartz schedules.

The table below is parsed once at import; a bad entry raises
``CronParseError`` as soon as the package loads.

    >>> from quartzcron.presets import WEEKDAYS_9AM, get_preset
    >>> str(WEEKDAYS_9AM)
    '0 0 9 ? * MON-FRI'
    >>> get_preset("Last-Friday") is get_preset("last_friday")
    True
"""

from __future__ import annotations

from quartzcron.expression import CronExpression

_PRESET_TEXT: dict[str, str] = {
    # Fixed intervals
    "every_second": "* * * * * ?",
    "every_minute": "0 * * * * ?",
    "every_5_min": "0 0/5 * * * ?",
    "every_15_min": "0 0/15 * * * ?",
    "every_30_min": "0 0/30 * * * ?",
    "hourly": "0 0 * * * ?",
    "every_2_hours": "0 0 0/2 * * ?",
    "every_6_hours": "0 0 0/6 * * ?",
    # Calendar
    "daily": "0 0 0 * * ?",
    "nightly_2am": "0 0 2 * * ?",
    "weekly": "0 0 0 ? * SUN",
    "monthly": "0 0 0 1 * ?",
    "quarterly": "0 0 0 1 1,4,7,10 ?",
    "yearly": "0 0 0 1 1 ?",
    # Working week
    "weekdays_9am": "0 0 9 ? * MON-FRI",
    "weekdays_6pm": "0 0 18 ? * MON-FRI",
    "business_hours_15min": "0 0/15 9-17 ? * MON-FRI",
    "maintenance_window": "0 0 22-2 ? * SAT",
    # Relative days (L, W and # markers)
    "first_of_month": "0 0 6 1 * ?",
    "last_of_month": "0 0 6 L * ?",
    "last_weekday_of_month": "0 0 18 LW * ?",
    "first_monday": "0 0 9 ? * MON#1",
    "last_friday": "0 0 17 ? * 6L",
    "end_of_quarter": "0 0 0 L 3,6,9,12 ?",
}

_ALIASES = {
    "midnight": "daily",
    "annually": "yearly",
}

PRESETS: dict[str, CronExpression] = {
    name: CronExpression.parse(text) for name, text in _PRESET_TEXT.items()
}
PRESETS.update({alias: PRESETS[target] for alias, target in _ALIASES.items()})

EVERY_SECOND = PRESETS["every_second"]
EVERY_MINUTE = PRESETS["every_minute"]
EVERY_5_MIN = PRESETS["every_5_min"]
EVERY_15_MIN = PRESETS["every_15_min"]
EVERY_30_MIN = PRESETS["every_30_min"]
HOURLY = PRESETS["hourly"]
EVERY_2_HOURS = PRESETS["every_2_hours"]
EVERY_6_HOURS = PRESETS["every_6_hours"]
DAILY = MIDNIGHT = PRESETS["daily"]
NIGHTLY_2AM = PRESETS["nightly_2am"]
WEEKLY = PRESETS["weekly"]
MONTHLY = PRESETS["monthly"]
QUARTERLY = PRESETS["quarterly"]
YEARLY = ANNUALLY = PRESETS["yearly"]
WEEKDAYS_9AM = PRESETS["weekdays_9am"]
WEEKDAYS_6PM = PRESETS["weekdays_6pm"]
BUSINESS_HOURS_15MIN = PRESETS["business_hours_15min"]
MAINTENANCE_WINDOW = PRESETS["maintenance_window"]
FIRST_OF_MONTH = PRESETS["first_of_month"]
LAST_OF_MONTH = PRESETS["last_of_month"]
LAST_WEEKDAY_OF_MONTH = PRESETS["last_weekday_of_month"]
FIRST_MONDAY = PRESETS["first_monday"]
LAST_FRIDAY = PRESETS["last_friday"]
END_OF_QUARTER = PRESETS["end_of_quarter"]


def get_preset(name: str) -> CronExpression | None:
    """Look up a preset by name.

    Matching ignores case and treats '-' like '_'. Returns None for
    unknown names.
    """
    return PRESETS.get(name.strip().lower().replace("-", "_"))


def list_presets() -> list[str]:
    return sorted(PRESETS)
