"""Batch validation of cron expressions stored in tabular data.

Schedules usually arrive in bulk (job manifests, exported scheduler state),
so this module validates a whole column at once and returns the frame with
the verdict alongside each row.

Example:
    >>> import polars as pl
    >>> df = pl.DataFrame({"schedule": ["0 0 12 * * ?", "0 0 * * * *"]})
    >>> validate_column(df, "schedule")["is_valid"].to_list()
    [True, False]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import polars as pl

from quartzcron.config import ParserConfig
from quartzcron.errors import ParseErrorKind
from quartzcron.expression import try_parse

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".csv", ".json", ".parquet", ".ndjson", ".jsonl")


def load_frame(path: str | Path) -> pl.DataFrame:
    """Load a data file into a Polars DataFrame based on extension.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file extension is not supported.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = file_path.suffix.lower()

    if suffix == ".csv":
        return pl.scan_csv(file_path).collect()
    elif suffix == ".json":
        return pl.read_json(file_path)
    elif suffix == ".parquet":
        return pl.scan_parquet(file_path).collect()
    elif suffix in (".ndjson", ".jsonl"):
        return pl.scan_ndjson(file_path).collect()
    else:
        raise ValueError(
            f"Unsupported file extension: {suffix}. "
            f"Supported extensions: {', '.join(SUPPORTED_EXTENSIONS)}"
        )


def validate_column(
    df: pl.DataFrame,
    column: str,
    config: ParserConfig | None = None,
) -> pl.DataFrame:
    """Validate every cron expression in ``column``.

    Args:
        df: Frame holding the expressions.
        column: Name of the string column to validate.
        config: Parser options.

    Returns:
        ``df`` with ``is_valid``, ``normalized``, ``error_kind`` and ``error``
        columns appended. Null expressions are reported as malformed.

    Raises:
        ValueError: If the column does not exist.
    """
    if column not in df.columns:
        raise ValueError(
            f"Column '{column}' not found. Available columns: {', '.join(df.columns)}"
        )

    is_valid: list[bool] = []
    normalized: list[str | None] = []
    kinds: list[str | None] = []
    errors: list[str | None] = []

    for value in df.get_column(column).to_list():
        if value is None:
            is_valid.append(False)
            normalized.append(None)
            kinds.append(ParseErrorKind.MALFORMED_EXPRESSION.value)
            errors.append("Missing cron expression")
            continue

        result = try_parse(str(value), config)
        is_valid.append(result.ok)
        if result.ok:
            normalized.append(str(result.expression))
            kinds.append(None)
            errors.append(None)
        else:
            normalized.append(None)
            kinds.append(result.error.kind.value)
            errors.append(result.error.message)

    logger.debug(
        "Validated %d expressions in column %r: %d invalid",
        len(is_valid),
        column,
        is_valid.count(False),
    )

    return df.with_columns(
        pl.Series("is_valid", is_valid, dtype=pl.Boolean),
        pl.Series("normalized", normalized, dtype=pl.Utf8),
        pl.Series("error_kind", kinds, dtype=pl.Utf8),
        pl.Series("error", errors, dtype=pl.Utf8),
    )


def validate_file(
    path: str | Path,
    column: str,
    config: ParserConfig | None = None,
) -> pl.DataFrame:
    """Load a data file and validate one of its columns."""
    return validate_column(load_frame(path), column, config)


def summarize(validated: pl.DataFrame) -> dict[str, Any]:
    """Summarize a frame returned by :func:`validate_column`.

    Returns:
        Dict with ``total``, ``valid``, ``invalid`` and ``by_kind`` counts.
    """
    total = validated.height
    invalid_rows = validated.filter(~pl.col("is_valid"))
    by_kind = (
        invalid_rows.group_by("error_kind")
        .agg(pl.len().alias("count"))
        .sort("error_kind")
    )
    return {
        "total": total,
        "valid": total - invalid_rows.height,
        "invalid": invalid_rows.height,
        "by_kind": {
            row["error_kind"]: row["count"] for row in by_kind.iter_rows(named=True)
        },
    }
