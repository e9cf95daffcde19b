"""Split a cron expression into positional field tokens."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from quartzcron.config import ParserConfig
from quartzcron.errors import CronParseError, ParseErrorKind
from quartzcron.fields import CronFieldType, FIELD_ORDER, REQUIRED_FIELDS

logger = logging.getLogger(__name__)

# Fields are separated by runs of spaces and tabs only.
_TOKEN_PATTERN = re.compile(r"[^ \t]+")


@dataclass(frozen=True)
class FieldToken:
    """One whitespace-delimited field of an expression.

    Attributes:
        field_type: Positional field type.
        text: Upper-cased field text.
        offset: Character offset of the token in the normalized expression.
    """

    field_type: CronFieldType
    text: str
    offset: int


def normalize(text: str) -> str:
    """Upper-case an expression, rejecting non-string input."""
    if text is None:
        raise TypeError("cron expression cannot be None")
    if not isinstance(text, str):
        raise TypeError(f"cron expression must be a string, got {type(text).__name__}")
    return text.upper()


def tokenize(expression: str, config: ParserConfig) -> list[FieldToken]:
    """Assign field types to the tokens of a normalized expression.

    Args:
        expression: Upper-cased expression text.
        config: Parser configuration.

    Returns:
        Six or seven field tokens.

    Raises:
        CronParseError: MALFORMED_EXPRESSION if the expression is too long,
            has fewer than six fields, or has extra fields while
            ``config.reject_extra_fields`` is set.
    """
    if len(expression) > config.max_expression_length:
        raise CronParseError(
            f"Expression exceeds maximum length of {config.max_expression_length} characters",
            ParseErrorKind.MALFORMED_EXPRESSION,
            expression,
            config.max_expression_length,
        )

    matches = list(_TOKEN_PATTERN.finditer(expression))
    if len(matches) < REQUIRED_FIELDS:
        raise CronParseError(
            "Unexpected end of expression.",
            ParseErrorKind.MALFORMED_EXPRESSION,
            expression,
            len(expression),
        )

    extra = matches[len(FIELD_ORDER):]
    if extra:
        if config.reject_extra_fields:
            raise CronParseError(
                f"Unexpected field after year: '{extra[0].group()}'",
                ParseErrorKind.MALFORMED_EXPRESSION,
                expression,
                extra[0].start(),
            )
        logger.warning(
            "Ignoring %d extra field(s) after year in cron expression %r",
            len(extra),
            expression,
        )

    return [
        FieldToken(field_type, match.group(), match.start())
        for field_type, match in zip(FIELD_ORDER, matches)
    ]
