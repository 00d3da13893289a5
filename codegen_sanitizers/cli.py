from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from codegen_sanitizers.core.docs import sanitize_documentation
from codegen_sanitizers.core.errors import SanitizerError
from codegen_sanitizers.core.naming import sanitize_names
from codegen_sanitizers.core.settings import load_default_info, load_settings
from codegen_sanitizers.formatters import json_fmt, markdown_fmt, rich_fmt

app = typer.Typer(add_completion=False, help="Sanitize names and docs for generated code.")
err_console = Console(stderr=True)

FORMATS = ("rich", "json", "markdown", "text")


def _fail(e: Exception) -> typer.Exit:
    err_console.print(f"[red]error:[/red] {escape(str(e))}", highlight=False)
    return typer.Exit(code=2)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each sanitization step"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def name(
    labels: list[str] = typer.Argument(..., help="Labels to sanitize (e.g. petStore.id)"),
    dialect: str | None = typer.Option(None, help="Target language: python or rust"),
    config: Path | None = typer.Option(None, help="Path to sanitizers.yml"),
    fmt: str = typer.Option("rich", "--format", help="Output format: rich, json, markdown or text"),
):
    """Sanitize labels into identifiers for generated code."""
    if fmt not in FORMATS:
        raise typer.BadParameter(f"Expected one of: {', '.join(FORMATS)}", param_hint="--format")

    try:
        settings = load_settings(config, dialect)
        idents = sanitize_names(labels, settings.dialect)
    except (SanitizerError, OSError, ValueError) as e:
        raise _fail(e)

    results: list[dict[str, Any]] = [
        {
            "input": label,
            "name": ident.name,
            "token": ident.token,
            "escaped": ident.escaped,
            "dialect": ident.dialect,
        }
        for label, ident in zip(labels, idents)
    ]

    if fmt == "json":
        typer.echo(json_fmt.render(results))
    elif fmt == "markdown":
        typer.echo(markdown_fmt.render(results))
    elif fmt == "text":
        for r in results:
            typer.echo(r["token"])
    else:
        rich_fmt.render(results)


@app.command()
def docs(
    path: Path | None = typer.Argument(None, help="Markdown file; stdin when omitted or '-'"),
    in_place: bool = typer.Option(False, "--in-place", "-i", help="Rewrite the file instead of printing"),
    check: bool = typer.Option(False, help="Exit 1 if the file would change"),
    info: str | None = typer.Option(None, help="Info string for untagged code blocks"),
    config: Path | None = typer.Option(None, help="Path to sanitizers.yml"),
):
    """Tag untagged fenced code blocks in Markdown documentation."""
    from_stdin = path is None or str(path) == "-"
    if in_place and from_stdin:
        raise typer.BadParameter("--in-place needs a file path")

    try:
        source = sys.stdin.buffer.read() if from_stdin else path.read_bytes()
        default_info = load_default_info(config)
        out = sanitize_documentation(source, info or default_info)
    except (SanitizerError, OSError, ValueError) as e:
        raise _fail(e)

    if check:
        if out.encode("utf-8") != source:
            err_console.print(f"[yellow]would change:[/yellow] {escape(str(path or '<stdin>'))}", highlight=False)
            raise typer.Exit(code=1)
        return

    if in_place:
        path.write_text(out, encoding="utf-8")
        return

    typer.echo(out, nl=False)


if __name__ == "__main__":
    app()
