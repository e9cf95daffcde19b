"""Field-set construction.

Turns parsed atoms into the concrete, ordered integer sets a trigger
evaluator works with. A range whose end precedes its start wraps past the
field maximum: hours ``22-2`` become ``{22, 23, 0, 1, 2}`` and day-of-week
``6-2`` becomes ``{6, 7, 1, 2}``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from quartzcron.errors import CronInternalError
from quartzcron.fields import CronFieldType, FIELD_CONSTRAINTS


# =============================================================================
# Field Set
# =============================================================================


@dataclass(frozen=True)
class FieldSet:
    """Immutable set of permitted values for one cron field.

    Attributes:
        field_type: The field these values belong to.
        values: Distinct permitted values in ascending order.
        is_wildcard: Field was given as an unstepped ``*``.
        is_unspecified: Field was given as ``?``; ``values`` is empty.
    """

    field_type: CronFieldType
    values: tuple[int, ...] = ()
    is_wildcard: bool = False
    is_unspecified: bool = False

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    @property
    def is_constrained(self) -> bool:
        """True unless the field is ``?``. A wildcard counts as a constraint."""
        return not self.is_unspecified

    def to_dict(self) -> dict[str, object]:
        return {
            "values": list(self.values),
            "is_wildcard": self.is_wildcard,
            "is_unspecified": self.is_unspecified,
        }


# =============================================================================
# Expansion
# =============================================================================


def expand(
    field_type: CronFieldType,
    start: int | None,
    end: int | None = None,
    step: int | None = None,
) -> list[int]:
    """Expand a value, range or stepped range into concrete field values.

    Args:
        field_type: Field being expanded.
        start: First value, or ``None`` for the field minimum (``*``).
        end: Last value, or ``None`` for the field maximum.
        step: Increment; ``None`` with a start and no end means a single value.

    Returns:
        Values in generation order (not necessarily sorted for wrapped ranges).

    Raises:
        CronInternalError: If a year range wraps; years have no modulus.
    """
    if start is not None and end is None and step is None:
        return [start]

    constraints = FIELD_CONSTRAINTS[field_type]
    step = step or 1
    start_at = constraints.min_value if start is None else start
    stop_at = constraints.max_value if end is None else end

    # Overflow into the next hour/day/month by iterating past the maximum and
    # folding back with the field modulus.
    modulus = None
    if stop_at < start_at:
        if constraints.modulus is None:
            raise CronInternalError("Start year must be less than stop year")
        modulus = constraints.modulus
        stop_at += modulus

    values = []
    for value in range(start_at, stop_at + 1, step):
        if modulus is not None:
            value %= modulus
            # 1-indexed fields include their max and never 0
            if value == 0 and constraints.one_indexed:
                value = modulus
        values.append(value)
    return values


# =============================================================================
# Accumulator
# =============================================================================


@dataclass
class FieldAccumulator:
    """Mutable per-parse collector for one field, frozen on success."""

    field_type: CronFieldType
    values: set[int] = field(default_factory=set)
    wildcard: bool = False
    unspecified: bool = False

    def add(self, value: int) -> None:
        self.values.add(value)

    def add_range(
        self,
        start: int | None,
        end: int | None = None,
        step: int | None = None,
    ) -> None:
        self.values.update(expand(self.field_type, start, end, step))

    def add_wildcard(self, step: int | None = None) -> None:
        # Only an unstepped '*' carries the marker; '*/n' is an explicit set.
        if step is None:
            self.wildcard = True
        self.add_range(None, None, step or 1)

    def mark_unspecified(self) -> None:
        self.unspecified = True

    def freeze(self) -> FieldSet:
        return FieldSet(
            field_type=self.field_type,
            values=tuple(sorted(self.values)),
            is_wildcard=self.wildcard,
            is_unspecified=self.unspecified,
        )
