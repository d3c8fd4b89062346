"""Tests for engine creation and schema bootstrap."""

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import OperationalError
from fastapi.testclient import TestClient

from finance_api import main
from finance_api.config import settings
from finance_api.database import build_engine, init_db


def test_init_db_creates_table():
    engine = create_engine("sqlite://")
    assert init_db(engine) is True
    assert "transactions" in inspect(engine).get_table_names()


def test_init_db_is_idempotent():
    engine = create_engine("sqlite://")
    assert init_db(engine) is True
    assert init_db(engine) is True


def test_init_db_failure_degrades(tmp_path, caplog):
    engine = create_engine(f"sqlite:///{tmp_path}/missing/dir/finance.db")

    assert init_db(engine) is False
    assert "Schema bootstrap failed" in caplog.text


def test_init_db_failure_strict(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path}/missing/dir/finance.db")

    with pytest.raises(OperationalError):
        init_db(engine, strict=True)


def test_build_engine_creates_sqlite_directory(tmp_path):
    path = tmp_path / "data" / "finance.db"
    engine = build_engine(f"sqlite:///{path}")

    assert init_db(engine) is True
    assert path.exists()
    engine.dispose()


def test_app_serves_when_bootstrap_fails(tmp_path, monkeypatch, caplog):
    """In degrade mode a failed bootstrap is logged and the app still handles requests."""
    broken = create_engine(f"sqlite:///{tmp_path}/missing/dir/finance.db")
    monkeypatch.setattr(main, "engine", broken)
    monkeypatch.setattr(settings, "schema_bootstrap_strict", False)

    with TestClient(main.app) as client:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    assert "Schema bootstrap failed" in caplog.text


def test_app_startup_aborts_when_bootstrap_strict(tmp_path, monkeypatch):
    broken = create_engine(f"sqlite:///{tmp_path}/missing/dir/finance.db")
    monkeypatch.setattr(main, "engine", broken)
    monkeypatch.setattr(settings, "schema_bootstrap_strict", True)

    with pytest.raises(OperationalError):
        with TestClient(main.app):
            pass
