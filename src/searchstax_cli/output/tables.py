"""Rich table rendering helpers."""

from __future__ import annotations

from typing import Any, Sequence

from rich.markup import escape
from rich.table import Table

# Identifiers are never truncated
_ID_COLUMNS = frozenset({"uid", "id"})

_STATE_STYLES = {
    "Running": "green",
    "Done": "green",
    "Failed": "bold red",
}


def _cell(value: Any) -> str:
    if value is None:
        return ""
    text = escape(str(value))
    style = _STATE_STYLES.get(text)
    return f"[{style}]{text}[/]" if style else text


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title)
    for i, col in enumerate(columns):
        if col in _ID_COLUMNS:
            widest = max((len(str(row[i])) for row in rows if row[i] is not None), default=0)
            table.add_column(col, no_wrap=True, min_width=max(len(col), widest))
        else:
            table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(_cell(cell) for cell in row))
    return table


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a record as a two-column field/value table."""
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, _cell(value))
    return table
