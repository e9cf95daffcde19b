"""Field and atom grammar for Quartz-style cron expressions.

Each field is split on commas into atoms, and each atom is read by a small
recursive-descent routine keyed on its leading character:

    JAN, MON-FRI, FRI#2, FRIL     names (month / day-of-week)
    ?                             unspecified (day fields only)
    *, */15, /15                  wildcard, optionally stepped
    L, LW, L-3, L-3W              last day of month; bare L on day-of-week = 7
    5, 5-10, 5-10/2, 5/15         numbers, ranges and steps
    15W, 5L, 6#3                  nearest weekday, last weekday, nth weekday

Helpers take the atom text, a position and the atom's absolute offset in the
expression, and return ``(value, new_position)`` so errors point into the
original input.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, field

from quartzcron.errors import CronParseError, ParseErrorKind
from quartzcron.fields import CronFieldType, FIELD_CONSTRAINTS
from quartzcron.fieldsets import FieldAccumulator
from quartzcron.tokenizer import FieldToken
from quartzcron.validator import check_field_combinations, check_increment, check_value

# Atoms starting with L that are last-day tokens rather than names.
_LAST_DAY_PATTERN = re.compile(r"L(?:W|-[0-9]*W?)?")

_NAME_LABELS = {
    CronFieldType.MONTH: "Month",
    CronFieldType.DAY_OF_WEEK: "Day-of-Week",
}


# =============================================================================
# Parse State
# =============================================================================


@dataclass
class ExpressionState:
    """Accumulators for one parse call.

    Owned by a single call to :func:`quartzcron.expression.parse` and
    discarded once frozen into a :class:`~quartzcron.expression.CronExpression`.
    """

    fields: dict[CronFieldType, FieldAccumulator] = field(
        default_factory=lambda: {ft: FieldAccumulator(ft) for ft in CronFieldType}
    )
    nth_day_of_week: int | None = None
    last_day_of_month: bool = False
    last_day_offset: int = 0
    nearest_weekday: bool = False
    last_day_of_week: bool = False

    def accumulator(self, field_type: CronFieldType) -> FieldAccumulator:
        return self.fields[field_type]


# =============================================================================
# Lexical Helpers
# =============================================================================


def _is_digit(c: str) -> bool:
    return c in string.digits


def _is_letter(c: str) -> bool:
    return "A" <= c <= "Z"


def read_number(text: str, pos: int) -> tuple[int, int]:
    """Read a run of ASCII digits starting at ``pos``.

    Returns:
        ``(value, position after the last digit)``.
    """
    end = pos
    while end < len(text) and _is_digit(text[end]):
        end += 1
    if end == pos:
        raise CronParseError(
            "Expected a number",
            ParseErrorKind.UNEXPECTED_CHARACTER,
            position=pos,
        )
    return int(text[pos:end]), end


def _unexpected(atom: str, pos: int, base: int) -> CronParseError:
    return CronParseError(
        f"Unexpected character: {atom[pos]}",
        ParseErrorKind.UNEXPECTED_CHARACTER,
        position=base + pos,
    )


def _expect_end(atom: str, pos: int, base: int) -> None:
    if pos < len(atom):
        raise _unexpected(atom, pos, base)


def _read_increment(
    atom: str,
    slash: int,
    base: int,
    field_type: CronFieldType,
) -> tuple[int, int]:
    """Read the integer after a '/' and check it against the field."""
    pos = slash + 1
    if pos >= len(atom) or atom[pos] in " \t":
        raise CronParseError(
            "'/' must be followed by an integer.",
            ParseErrorKind.MISSING_INCREMENT_VALUE,
            position=base + slash,
        )
    if not _is_digit(atom[pos]):
        raise CronParseError(
            f"Unexpected character '{atom[pos]}' after '/'",
            ParseErrorKind.UNEXPECTED_CHARACTER,
            position=base + pos,
        )
    step, pos = read_number(atom, pos)
    check_increment(field_type, step, base + slash)
    return step, pos


def _read_nth(atom: str, pos: int, base: int) -> int:
    """Read the 1-5 occurrence number following a '#'."""
    digits = atom[pos:]
    if not digits or not all(_is_digit(c) for c in digits) or not 1 <= int(digits) <= 5:
        raise CronParseError(
            "A numeric value between 1 and 5 must follow the '#' option",
            ParseErrorKind.INVALID_NUMERIC_VALUE,
            position=base + pos,
        )
    return int(digits)


def _option_not_valid(option: str, pos: int, base: int) -> CronParseError:
    return CronParseError(
        f"'{option}' option is not valid here. (pos={pos})",
        ParseErrorKind.UNSUPPORTED_COMBINATION,
        position=base + pos,
    )


# =============================================================================
# Atom Parsers
# =============================================================================


def _lookup_name(name: str, field_type: CronFieldType, position: int) -> int:
    value = FIELD_CONSTRAINTS[field_type].names.get(name)
    if value is None:
        raise CronParseError(
            f"Invalid {_NAME_LABELS[field_type]} value: '{name}'",
            ParseErrorKind.INVALID_NAMED_VALUE,
            position=position,
        )
    return value


def _parse_named(atom: str, base: int, field_type: CronFieldType, state: ExpressionState) -> None:
    """Parse ``JAN``, ``JAN-MAR``, ``MON-FRI``, ``FRI#2`` or ``FRIL``."""
    name = atom[:3]
    if field_type not in _NAME_LABELS:
        raise CronParseError(
            f"Illegal characters for this position: '{name}'",
            ParseErrorKind.UNEXPECTED_CHARACTER,
            position=base,
        )

    constraints = FIELD_CONSTRAINTS[field_type]
    start = _lookup_name(name, field_type, base)
    end = None
    pos = 3
    if pos < len(atom):
        c = atom[pos]
        if c == "-":
            end = _lookup_name(atom[pos + 1:pos + 4], field_type, base + pos + 1)
            pos += 4
        elif c == "#" and constraints.supports_hash:
            state.nth_day_of_week = _read_nth(atom, pos + 1, base)
            pos = len(atom)
        elif c == "L" and constraints.supports_last_weekday:
            state.last_day_of_week = True
            pos += 1
    _expect_end(atom, pos, base)

    accumulator = state.accumulator(field_type)
    if end is None:
        accumulator.add(start)
    else:
        accumulator.add_range(start, end, 1)


def _parse_unspecified(atom: str, base: int, field_type: CronFieldType, state: ExpressionState) -> None:
    """Parse ``?``."""
    if len(atom) > 1:
        raise CronParseError(
            f"Illegal character after '?': {atom[1]}",
            ParseErrorKind.UNEXPECTED_CHARACTER,
            position=base + 1,
        )
    if not FIELD_CONSTRAINTS[field_type].supports_question:
        raise CronParseError(
            "'?' can only be specified for Day-of-Month or Day-of-Week.",
            ParseErrorKind.UNSUPPORTED_COMBINATION,
            position=base,
        )
    state.accumulator(field_type).mark_unspecified()


def _parse_wildcard(atom: str, base: int, field_type: CronFieldType, state: ExpressionState) -> None:
    """Parse ``*``, ``*/n`` or ``/n``."""
    accumulator = state.accumulator(field_type)
    if atom == "*":
        accumulator.add_wildcard()
        return

    slash = 0
    if atom[0] == "*":
        slash = 1
        if atom[slash] != "/":
            raise _unexpected(atom, slash, base)

    step, pos = _read_increment(atom, slash, base, field_type)
    _expect_end(atom, pos, base)
    accumulator.add_wildcard(step)


def _parse_last(atom: str, base: int, field_type: CronFieldType, state: ExpressionState) -> None:
    """Parse ``L``, ``LW``, ``L-n`` and ``L-nW``.

    On day-of-month ``L`` is the last day of the month. On day-of-week a bare
    ``L`` is the value 7 (Saturday), not "last weekday".
    """
    constraints = FIELD_CONSTRAINTS[field_type]
    if constraints.supports_last_weekday:
        if len(atom) > 1:
            raise _option_not_valid("L", 0, base)
        state.accumulator(field_type).add(7)
        return

    if not constraints.supports_last_day:
        raise _option_not_valid("L", 0, base)

    state.last_day_of_month = True
    pos = 1
    if pos < len(atom) and atom[pos] == "-":
        if pos + 1 >= len(atom) or not _is_digit(atom[pos + 1]):
            raise CronParseError(
                "A numeric offset must follow 'L-'",
                ParseErrorKind.MALFORMED_EXPRESSION,
                position=base + pos,
            )
        offset, pos = read_number(atom, pos + 1)
        if offset > 30:
            raise CronParseError(
                "Offset from last day must be <= 30",
                ParseErrorKind.INVALID_NUMERIC_VALUE,
                position=base + 2,
            )
        state.last_day_offset = offset
    if pos < len(atom) and atom[pos] == "W":
        state.nearest_weekday = True
        pos += 1
    _expect_end(atom, pos, base)


def _parse_numeric(atom: str, base: int, field_type: CronFieldType, state: ExpressionState) -> None:
    """Parse a number and whatever suffix follows it."""
    constraints = FIELD_CONSTRAINTS[field_type]
    accumulator = state.accumulator(field_type)
    value, pos = read_number(atom, 0)

    if pos >= len(atom):
        check_value(field_type, value, position=base)
        accumulator.add(value)
        return

    c = atom[pos]
    if c == "L":
        if not constraints.supports_last_weekday:
            raise _option_not_valid("L", pos, base)
        check_value(field_type, value, position=base)
        _expect_end(atom, pos + 1, base)
        state.last_day_of_week = True
        accumulator.add(value)

    elif c == "W":
        if not constraints.supports_w:
            raise _option_not_valid("W", pos, base)
        if value > 31:
            raise CronParseError(
                "The 'W' option does not make sense with values larger than 31 "
                "(max number of days in a month)",
                ParseErrorKind.UNSUPPORTED_COMBINATION,
                position=base + pos,
            )
        check_value(field_type, value, position=base)
        _expect_end(atom, pos + 1, base)
        state.nearest_weekday = True
        accumulator.add(value)

    elif c == "#":
        if not constraints.supports_hash:
            raise _option_not_valid("#", pos, base)
        state.nth_day_of_week = _read_nth(atom, pos + 1, base)
        check_value(field_type, value, position=base)
        accumulator.add(value)

    elif c == "-":
        pos += 1
        if pos >= len(atom):
            raise CronParseError(
                "Range end expected after '-'",
                ParseErrorKind.MALFORMED_EXPRESSION,
                position=base + pos - 1,
            )
        if not _is_digit(atom[pos]):
            raise _unexpected(atom, pos, base)
        end, pos = read_number(atom, pos)
        step = None
        if pos < len(atom) and atom[pos] == "/":
            step, pos = _read_increment(atom, pos, base, field_type)
        _expect_end(atom, pos, base)
        check_value(field_type, value, end, position=base)
        accumulator.add_range(value, end, step or 1)

    elif c == "/":
        step, pos = _read_increment(atom, pos, base, field_type)
        _expect_end(atom, pos, base)
        check_value(field_type, value, position=base)
        accumulator.add_range(value, None, step)

    else:
        raise _unexpected(atom, pos, base)


def parse_atom(atom: str, base: int, field_type: CronFieldType, state: ExpressionState) -> None:
    """Interpret one comma-separated atom into ``state``.

    Args:
        atom: Upper-cased atom text, never empty.
        base: Offset of the atom within the expression.
        field_type: Field the atom belongs to.
        state: Accumulators for the current parse.
    """
    c = atom[0]
    if _is_letter(c) and not _LAST_DAY_PATTERN.fullmatch(atom):
        _parse_named(atom, base, field_type, state)
    elif c == "?":
        _parse_unspecified(atom, base, field_type, state)
    elif c in "*/":
        _parse_wildcard(atom, base, field_type, state)
    elif c == "L":
        _parse_last(atom, base, field_type, state)
    elif _is_digit(c):
        _parse_numeric(atom, base, field_type, state)
    else:
        raise _unexpected(atom, 0, base)


# =============================================================================
# Field Parser
# =============================================================================


def parse_field(token: FieldToken, state: ExpressionState) -> None:
    """Parse every atom of one field token into ``state``.

    Raises:
        CronParseError: On the first invalid atom or combination.
    """
    check_field_combinations(token.field_type, token.text, token.offset)

    offset = token.offset
    atoms = token.text.split(",")
    for atom in atoms:
        if not atom:
            raise CronParseError(
                f"Empty value in {token.field_type.label} list",
                ParseErrorKind.MALFORMED_EXPRESSION,
                position=offset,
            )
        parse_atom(atom, offset, token.field_type, state)
        offset += len(atom) + 1

    if state.accumulator(token.field_type).unspecified and len(atoms) > 1:
        raise CronParseError(
            "'?' cannot be combined with other values",
            ParseErrorKind.UNSUPPORTED_COMBINATION,
            position=token.offset,
        )
