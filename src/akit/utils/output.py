"""Console output: rich tables and messages for humans, JSON when piped."""

from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()
error_console = Console(stderr=True)


def is_piped() -> bool:
    return not sys.stdout.isatty()


def _resolve(fmt: str | None) -> str:
    if fmt is None:
        return "json" if is_piped() else "text"
    return fmt


def _plain(data: Any) -> Any:
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json", exclude_none=True)
    if hasattr(data, "to_dict"):
        return data.to_dict()
    return data


def output(data: Any, fmt: str | None = None) -> None:
    """Print ``data`` as JSON or as rich text.

    Pydantic models and report objects (``to_dict``) are converted first.
    """
    data = _plain(data)
    if _resolve(fmt) == "json":
        if isinstance(data, str):
            print(json.dumps({"value": data}))
        else:
            print(json.dumps(data, indent=2, default=str))
    elif isinstance(data, str):
        console.print(data)
    elif isinstance(data, (dict, list)):
        console.print_json(json.dumps(data, default=str))
    else:
        console.print(str(data))


def output_table(
    rows: list[dict[str, Any]],
    columns: list[str],
    fmt: str | None = None,
    title: str | None = None,
) -> None:
    if _resolve(fmt) == "json":
        print(json.dumps(rows, indent=2, default=str))
        return
    table = Table(title=title)
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for row in rows:
        table.add_row(*[str(row.get(col, "")) for col in columns])
    console.print(table)


def error(msg: str) -> None:
    error_console.print(f"[red]Error:[/red] {msg}")


def warning(msg: str) -> None:
    error_console.print(f"[yellow]Warning:[/yellow] {msg}")


def success(msg: str) -> None:
    console.print(f"[green]{msg}[/green]")


def info(msg: str) -> None:
    console.print(f"[dim]{msg}[/dim]")
