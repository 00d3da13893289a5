from __future__ import annotations

import json

from codegen_sanitizers.formatters import json_fmt, markdown_fmt, rich_fmt


RESULTS = [
    {"input": "petStore", "name": "pet_store", "token": "pet_store", "escaped": False, "dialect": "rust"},
    {"input": "type", "name": "type", "token": "r#type", "escaped": True, "dialect": "rust"},
]


def test_json_render():
    data = json.loads(json_fmt.render(RESULTS))
    assert data == RESULTS


def test_markdown_render():
    out = markdown_fmt.render(RESULTS)
    assert out.startswith("## Sanitized names (rust)")
    assert "| Label | Identifier | Escaped |" in out
    assert "| `petStore` | `pet_store` |  |" in out
    assert "| `type` | `r#type` | yes |" in out


def test_markdown_render_empty():
    assert markdown_fmt.render([]) == ""


def test_rich_render(capsys):
    rich_fmt.render(RESULTS)
    out = capsys.readouterr().out
    assert "pet_store" in out
    assert "r#type" in out
