"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("RECORDS_DB_URL", "postgresql://example")

    assert db_module._get_env_var("RECORDS_DB_URL") == "postgresql://example"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("RECORDS_DB_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("RECORDS_DB_URL")


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://records")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://records"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True


def test_get_records_engine_caches_engine(monkeypatch):
    """get_records_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_records_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("RECORDS_DB_URL", "postgresql://records")

    engine_one = db_module.get_records_engine()
    engine_two = db_module.get_records_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://records"
    assert created == ["postgresql://records"]


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the module helper."""
    monkeypatch.setattr(db_module, "get_records_engine", lambda: "records")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_records_engine() == "records"
