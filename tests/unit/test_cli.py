"""Tests for the person-api command line."""

from pathlib import Path

import uvicorn
from sqlalchemy import create_engine, inspect
from typer.testing import CliRunner

from src.person_api.cli import app
from src.person_api.runtime.config.config_data import ConfigData, DatabaseConfig
from src.person_api.runtime.context import with_context

runner = CliRunner()


def test_init_db_creates_person_table(tmp_path: Path):
    url = f"sqlite:///{tmp_path / 'cli.db'}"

    with with_context(ConfigData(database=DatabaseConfig(url=url))):
        result = runner.invoke(app, ["init-db"])

    assert result.exit_code == 0, result.output
    assert "Tables created" in result.output

    engine = create_engine(url)
    try:
        assert "person" in inspect(engine).get_table_names()
    finally:
        engine.dispose()


def test_serve_passes_options_to_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "9001"])

    assert result.exit_code == 0, result.output
    [(args, kwargs)] = calls
    assert args == ("src.person_api.api.http.app:app",)
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9001
    assert kwargs["reload"] is False


def test_serve_defaults_to_configured_address(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append(kwargs))

    with with_context(ConfigData()):
        result = runner.invoke(app, ["serve"])

    assert result.exit_code == 0, result.output
    assert calls[0]["port"] == 8080
