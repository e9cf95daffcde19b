"""Exceptions raised by the cron expression engine.

Every user-input problem is reported through :class:`CronParseError`, which
carries a :class:`ParseErrorKind` so callers can branch on the category
without matching message text. Engine defects use :class:`CronInternalError`
instead so they are never mistaken for bad input.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Categories of cron expression parse failures."""

    MALFORMED_EXPRESSION = "malformed_expression"
    INVALID_NUMERIC_VALUE = "invalid_numeric_value"
    INVALID_NAMED_VALUE = "invalid_named_value"
    UNSUPPORTED_COMBINATION = "unsupported_combination"
    INCREMENT_OUT_OF_RANGE = "increment_out_of_range"
    MISSING_INCREMENT_VALUE = "missing_increment_value"
    EXCLUSIVITY_VIOLATION = "exclusivity_violation"
    UNEXPECTED_CHARACTER = "unexpected_character"


class CronParseError(ValueError):
    """Raised when cron expression parsing fails.

    Attributes:
        message: Human-readable description of the failure.
        kind: Failure category.
        expression: The normalized expression being parsed.
        position: Character offset into the expression, or -1 if unknown.
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind = ParseErrorKind.MALFORMED_EXPRESSION,
        expression: str = "",
        position: int = -1,
    ) -> None:
        self.message = message
        self.kind = kind
        self.expression = expression
        self.position = position
        super().__init__(message)

    def with_context(self, expression: str, offset: int = 0) -> "CronParseError":
        """Return a copy anchored to a full expression.

        Field parsers report positions relative to the text they were given;
        this shifts the position by ``offset`` so it points into ``expression``.
        """
        position = self.position + offset if self.position >= 0 else self.position
        return CronParseError(self.message, self.kind, expression, position)

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "kind": self.kind.value,
            "expression": self.expression,
            "position": self.position,
        }

    def __repr__(self) -> str:
        return (
            f"CronParseError({self.message!r}, kind={self.kind.name}, "
            f"position={self.position})"
        )


class CronInternalError(AssertionError):
    """Raised when the engine reaches a state valid input can never produce."""
