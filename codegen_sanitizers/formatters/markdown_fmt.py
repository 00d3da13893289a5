"""Markdown formatter suitable for PR comments and generated READMEs."""

from __future__ import annotations

from typing import Any


def _md_table(rows: list[list[str]]) -> str:
    header = "| " + " | ".join(rows[0]) + " |"
    sep = "|" + "|".join(["---"] * len(rows[0])) + "|"
    body = "\n".join(["| " + " | ".join(r) + " |" for r in rows[1:]])
    return "\n".join([header, sep, body])


def _cell(value: str) -> str:
    return "`" + value.replace("|", "\\|") + "`"


def render(results: list[dict[str, Any]]) -> str:
    """
    Render name sanitization results as a Markdown table.

    Labels that come out unchanged are listed too, so the table documents the
    full mapping from schema labels to generated identifiers.
    """
    if not results:
        return ""

    dialect = results[0].get("dialect")
    lines: list[str] = [f"## Sanitized names ({dialect})", ""]

    rows = [["Label", "Identifier", "Escaped"]]
    for r in results:
        rows.append([_cell(str(r["input"])), _cell(str(r["token"])), "yes" if r.get("escaped") else ""])
    lines.append(_md_table(rows))

    return "\n".join(lines)
