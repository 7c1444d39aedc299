from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cli.app import app
from models.environment import Environment
from settings import get_settings


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.setattr("cli.app.configure_logging", lambda: None)
    monkeypatch.delenv("EEML_DOCUMENT_VERSION", raising=False)
    monkeypatch.delenv("EEML_JSON_INDENT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def complete_path(tmp_path: Path, complete_eeml: str) -> Path:
    path = tmp_path / "complete.xml"
    path.write_text(complete_eeml, encoding="utf-8")
    return path


def test_inspect_command(runner: CliRunner, complete_path: Path) -> None:
    result = runner.invoke(app, ["inspect", str(complete_path)])

    assert result.exit_code == 0
    assert "title: A Room Somewhere" in result.stdout
    assert "status: frozen" in result.stdout
    assert "updated: 2007-05-04T18:13:51Z" in result.stdout
    assert "name: My Room" in result.stdout
    assert "data_count: 3" in result.stdout
    assert "units: Celsius, blushesPerHour, meter" in result.stdout
    assert "  - [0] 36.2 C (temperature)" in result.stdout


def test_inspect_rejects_malformed_document(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "broken.xml"
    path.write_text("<eeml><environment>", encoding="utf-8")

    result = runner.invoke(app, ["inspect", str(path)])

    assert result.exit_code == 1
    assert "Could not read" in result.output


def test_export_then_build(runner: CliRunner, complete_path: Path, tmp_path: Path, complete_eeml: str) -> None:
    json_path = tmp_path / "complete.json"

    exported = runner.invoke(app, ["export", str(complete_path), "--output", str(json_path)])
    assert exported.exit_code == 0

    payload = json.loads(json_path.read_text(encoding="utf-8"))
    assert payload["title"] == "A Room Somewhere"
    assert payload["data"][0]["tags"] == ["temperature"]

    built = runner.invoke(app, ["build", str(json_path), "--version", "5"])
    assert built.exit_code == 0
    assert built.stdout.strip() == complete_eeml


def test_build_uses_version_from_settings(runner: CliRunner, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("EEML_DOCUMENT_VERSION", "7")
    path = tmp_path / "minimal.json"
    path.write_text(json.dumps({"data": [{"value": 36.2}]}), encoding="utf-8")

    result = runner.invoke(app, ["build", str(path)])

    assert result.exit_code == 0
    assert '<eeml version="7" ' in result.stdout
    assert Environment.from_eeml(result.stdout.strip())[0].value == 36.2


def test_build_without_data_fails(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"title": "Nothing here"}), encoding="utf-8")

    result = runner.invoke(app, ["build", str(path)])

    assert result.exit_code == 1
    assert "EEML requires at least one data item" in result.output


def test_build_rejects_invalid_json_document(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "invalid.json"
    path.write_text(json.dumps({"status": "melted", "data": [{"value": 1}]}), encoding="utf-8")

    result = runner.invoke(app, ["build", str(path)])

    assert result.exit_code == 1
    assert "Could not build" in result.output
