"""Output dispatcher: renders records as a table, JSON, YAML, or CSV."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel
from rich.console import Console

from searchstax_cli.output.tables import kv_table, make_table

console = Console()

# Secrets are never echoed in any output format
MASKED_FIELDS = frozenset({"password", "token"})


def to_data(value: Any) -> Any:
    """Convert models (or lists of them) to plain JSON-compatible data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [to_data(v) for v in value]
    return value


def masked(record: dict[str, Any]) -> dict[str, Any]:
    return {
        k: ("****" if k in MASKED_FIELDS and v else v) for k, v in record.items()
    }


def masked_data(value: Any) -> Any:
    """``to_data`` with secrets masked in each record."""
    data = to_data(value)
    if isinstance(data, dict):
        return masked(data)
    if isinstance(data, list):
        return [masked(d) if isinstance(d, dict) else d for d in data]
    return data


def output_json(data: Any) -> None:
    console.print_json(json.dumps(masked_data(data), indent=2, default=str))


def output_yaml(data: Any) -> None:
    import yaml

    console.print(
        yaml.safe_dump(masked_data(data), default_flow_style=False, sort_keys=False),
        end="",
        soft_wrap=True,
    )


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(columns)
    writer.writerows(
        [[str(v) if v is not None else "" for v in row] for row in rows]
    )
    console.print(buf.getvalue(), end="", markup=False, soft_wrap=True)


def record_rows(
    records: Sequence[Any], fields: Sequence[str],
) -> list[list[Any]]:
    """Pick ``fields`` from each record, masking secrets."""
    rows = []
    for record in records:
        data = masked(to_data(record))
        rows.append([data.get(f) for f in fields])
    return rows


def output(
    data: Any,
    fmt: str = "table",
    *,
    fields: Sequence[str] | None = None,
    title: str | None = None,
) -> None:
    """Dispatch output to the appropriate formatter.

    ``data`` is a single record or a list of records; ``fields`` selects the
    table/CSV columns for lists.
    """
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif isinstance(data, (list, tuple)):
        columns = list(fields or [])
        rows = record_rows(data, columns)
        if fmt == "csv":
            output_csv(columns, rows)
        else:
            console.print(make_table(title, columns, rows))
    else:
        record = masked(to_data(data))
        if fmt == "csv":
            output_csv(list(record), [list(record.values())])
        else:
            console.print(kv_table(record, title=title))
