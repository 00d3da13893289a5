"""Rich formatter for interactive CLI output."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def render(results: list[dict[str, Any]]) -> None:
    """
    Print name sanitization results as a Rich table.

    Escaped identifiers are highlighted so keyword collisions stand out.
    """
    dialect = results[0].get("dialect") if results else "-"

    tbl = Table(title=f"Sanitized names ({dialect})")
    tbl.add_column("Label")
    tbl.add_column("Identifier")
    tbl.add_column("Escaped", justify="center")

    for r in results:
        token = escape(str(r["token"]))
        if r.get("escaped"):
            token = f"[yellow]{token}[/yellow]"
        tbl.add_row(escape(str(r["input"])), token, "yes" if r.get("escaped") else "")

    console.print(tbl)
