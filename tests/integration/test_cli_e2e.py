from __future__ import annotations

import json
import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest


def _have_cmd(cmd: str) -> bool:
    return shutil.which(cmd) is not None


def _cli() -> list[str]:
    """Prefer the installed console script, fall back to `python -m`."""
    if _have_cmd("codegen-sanitizers"):
        return ["codegen-sanitizers"]
    return [os.environ.get("PYTHON", sys.executable), "-m", "codegen_sanitizers.cli"]


def _try_run(
    args: list[str], cwd: Path | None = None, stdin: str | None = None, env: dict | None = None
) -> subprocess.CompletedProcess:
    return subprocess.run(
        [*_cli(), *args],
        cwd=str(cwd) if cwd else None,
        env=env,
        input=stdin,
        capture_output=True,
        text=True,
    )


def _run(args: list[str], cwd: Path | None = None, stdin: str | None = None, env: dict | None = None) -> str:
    p = _try_run(args, cwd=cwd, stdin=stdin, env=env)
    if p.returncode != 0:
        raise RuntimeError(
            f"Command failed:\n  {' '.join(args)}\n\nSTDOUT:\n{p.stdout}\n\nSTDERR:\n{p.stderr}"
        )
    return p.stdout


def _clean_env() -> dict:
    env = dict(os.environ)
    env.pop("CODEGEN_SANITIZERS_DIALECT", None)
    return env


@pytest.mark.integration
def test_name_json(tmp_path: Path):
    out = _run(["name", "petStore.id", "builder", "class", "--format", "json"], cwd=tmp_path, env=_clean_env())
    result = json.loads(out)

    assert [r["token"] for r in result] == ["pet_store_id", "_builder", "class_"]
    assert [r["escaped"] for r in result] == [False, False, True]
    assert {r["dialect"] for r in result} == {"python"}


@pytest.mark.integration
def test_name_rust_text(tmp_path: Path):
    out = _run(["name", "type", "self", "HTTPServer", "--dialect", "rust", "--format", "text"], cwd=tmp_path)
    assert out.splitlines() == ["r#type", "self_", "http_server"]


@pytest.mark.integration
def test_name_dialect_from_settings_file(tmp_path: Path):
    (tmp_path / "sanitizers.yml").write_text("dialect: rust\n", encoding="utf-8")
    out = _run(["name", "type", "--format", "text"], cwd=tmp_path, env=_clean_env())
    assert out.strip() == "r#type"


@pytest.mark.integration
def test_name_errors_exit_2(tmp_path: Path):
    p = _try_run(["name", "", "--format", "text"], cwd=tmp_path)
    assert p.returncode == 2
    assert "empty" in p.stderr

    p = _try_run(["name", "fooBar", "foo_bar", "--format", "text"], cwd=tmp_path)
    assert p.returncode == 2
    assert "foo_bar" in p.stderr


@pytest.mark.integration
def test_docs_stdin(tmp_path: Path):
    out = _run(["docs"], cwd=tmp_path, stdin="```\nfoo\n```\n\n```\nbar\n```\n")
    assert out == "``` text\nfoo\n```\n\n``` text\nbar\n```\n"


@pytest.mark.integration
def test_docs_in_place_and_check(tmp_path: Path):
    doc = tmp_path / "README.md"
    doc.write_text("# Usage\n\n```\nmake build\n```\n", encoding="utf-8")

    p = _try_run(["docs", str(doc), "--check"], cwd=tmp_path)
    assert p.returncode == 1
    assert "would change" in p.stderr

    _run(["docs", str(doc), "--in-place", "--info", "console"], cwd=tmp_path)
    assert doc.read_text(encoding="utf-8") == "# Usage\n\n``` console\nmake build\n```\n"

    p = _try_run(["docs", str(doc), "--check"], cwd=tmp_path)
    assert p.returncode == 0


@pytest.mark.integration
def test_docs_invalid_utf8_exit_2(tmp_path: Path):
    doc = tmp_path / "bad.md"
    doc.write_bytes(b"```\n\xff\n```\n")

    p = _try_run(["docs", str(doc)], cwd=tmp_path)
    assert p.returncode == 2
    assert "UTF-8" in p.stderr


@pytest.mark.integration
def test_docs_ignores_dialect_env(tmp_path: Path):
    env = _clean_env()
    env["CODEGEN_SANITIZERS_DIALECT"] = "cobol"
    out = _run(["docs"], cwd=tmp_path, stdin="```\nfoo\n```\n", env=env)
    assert out == "``` text\nfoo\n```\n"


@pytest.mark.integration
def test_docs_directory_exit_2(tmp_path: Path):
    p = _try_run(["docs", str(tmp_path)], cwd=tmp_path)
    assert p.returncode == 2
    assert "Traceback" not in p.stderr
