"""
Tests for the command line interface
"""

import json
import logging

import pytest
from click.testing import CliRunner

from bandstand import __version__
from bandstand.cli import cli
from bandstand.config import settings


@pytest.fixture(autouse=True)
def restore_settings(monkeypatch):
    """serve writes the chosen log level back into settings."""
    monkeypatch.setattr(settings, "log_level", settings.log_level)
    monkeypatch.setattr(settings, "debug", settings.debug)


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_schema_command():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0, result.output
    assert "type Player" in result.output
    assert "hello: String!" in result.output


def test_players_table():
    result = CliRunner().invoke(cli, ["players"])

    assert result.exit_code == 0, result.output
    assert "Found 11 player(s)" in result.output
    assert "Steve" in result.output


def test_players_json():
    result = CliRunner().invoke(cli, ["players", "--output-format", "json"])

    assert result.exit_code == 0, result.output
    rows = json.loads(result.output)
    assert len(rows) == 11
    assert rows[0] == {"id": "1000", "name": "Steve", "instrument": "GUITAR"}


def test_serve_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr("bandstand.cli.uvicorn.run", fake_run)

    result = CliRunner().invoke(cli, ["serve", "--host", "127.0.0.1", "--port", "4000"])

    assert result.exit_code == 0, result.output
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 4000
    assert not isinstance(calls["app"], str)


def test_serve_with_reload_passes_import_string(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr("bandstand.cli.uvicorn.run", fake_run)

    result = CliRunner().invoke(cli, ["serve", "--reload"])

    assert result.exit_code == 0, result.output
    assert calls["app"] == "bandstand.api.app:app"
    assert calls["reload"] is True
    assert calls["workers"] == 1


def test_serve_rejects_bad_port():
    result = CliRunner().invoke(cli, ["serve", "--port", "70000"])

    assert result.exit_code != 0


def test_serve_applies_log_level(monkeypatch):
    monkeypatch.setattr("bandstand.cli.uvicorn.run", lambda app, **kwargs: None)

    result = CliRunner().invoke(cli, ["serve", "--log-level", "warning"])

    assert result.exit_code == 0, result.output
    assert logging.getLogger().level == logging.WARNING
    assert settings.log_level == "WARNING"
