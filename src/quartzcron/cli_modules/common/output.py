"""Rich rendering for CLI commands."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from rich.console import Console
from rich.table import Table

from quartzcron.expression import CronExpression
from quartzcron.fieldsets import FieldSet


def compact_values(values: Sequence[int]) -> str:
    """Render sorted values with consecutive runs collapsed, e.g. ``1-5,10``."""
    if not values:
        return "-"

    parts = []
    start = prev = values[0]
    for value in list(values[1:]) + [None]:
        if value is not None and value == prev + 1:
            prev = value
            continue
        parts.append(str(start) if start == prev else f"{start}-{prev}")
        if value is not None:
            start = prev = value
    return ",".join(parts)


def _describe_field(field_set: FieldSet) -> str:
    if field_set.is_unspecified:
        return "[dim]? (unspecified)[/dim]"
    text = compact_values(field_set.values)
    if field_set.is_wildcard:
        return f"* ({text})"
    return text


def _describe_markers(expr: CronExpression) -> list[str]:
    markers = expr.markers
    lines = []
    if markers.last_day_of_month:
        if markers.last_day_offset:
            lines.append(f"last day of month minus {markers.last_day_offset}")
        else:
            lines.append("last day of month")
    if markers.nearest_weekday:
        lines.append("nearest weekday")
    if markers.last_day_of_week:
        lines.append("last occurrence of weekday in month")
    if markers.nth_day_of_week is not None:
        lines.append(f"occurrence #{markers.nth_day_of_week} of weekday in month")
    return lines


def print_expression(console: Console, expr: CronExpression) -> None:
    """Print the field sets and markers of a parsed expression."""
    console.print()
    console.print(f"[bold]{expr.expression}[/bold]")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Field", style="cyan")
    table.add_column("Values", style="white")
    for field_set in expr.fields:
        table.add_row(field_set.field_type.label, _describe_field(field_set))
    console.print(table)

    for line in _describe_markers(expr):
        console.print(f"  [yellow]•[/yellow] {line}")
    console.print()


def print_presets(console: Console, presets: Iterable[tuple[str, CronExpression]]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Preset", style="cyan")
    table.add_column("Expression", style="white")
    for name, expr in presets:
        table.add_row(name, expr.expression)
    console.print(table)


def print_summary(console: Console, summary: dict[str, Any], invalid_rows: list[dict[str, Any]]) -> None:
    """Print batch validation results."""
    console.print()
    if not summary["invalid"]:
        console.print(f"[green]✓ All {summary['total']} expressions are valid[/green]")
        console.print()
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Row", justify="right")
    table.add_column("Expression", style="cyan")
    table.add_column("Kind", style="yellow")
    table.add_column("Error", style="white")
    for row in invalid_rows:
        table.add_row(
            str(row["row"]),
            str(row["expression"]),
            str(row["error_kind"]),
            str(row["error"]),
        )
    console.print(table)
    console.print(
        f"Summary: {summary['invalid']} of {summary['total']} expressions are invalid"
    )
    console.print()
