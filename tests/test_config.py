import pytest

from processdesk.config import FIXTURES_DIR, Settings
from processdesk.storage.factory import build_storage
from processdesk.storage.memory_storage import MemoryStorage
from processdesk.storage.sql_storage import SqlStorage


def test_settings_defaults(monkeypatch):
    for name in ("APP_ENV", "STORAGE_BACKEND", "DATABASE_URL", "SEED_FIXTURE", "FRONTEND_ORIGIN"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.is_development
    assert settings.storage_backend == "memory"
    assert settings.database_url == "sqlite:///./app.db"
    assert settings.seed_fixture == FIXTURES_DIR / "demo_seed.json"


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("APP_ENV", "Production")
    monkeypatch.setenv("STORAGE_BACKEND", "database")
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("SEED_FIXTURE", str(tmp_path / "seed.json"))
    monkeypatch.setenv("SQL_ECHO", "true")

    settings = Settings.from_env()

    assert settings.app_env == "production"
    assert not settings.is_development
    assert settings.storage_backend == "database"
    assert settings.sql_echo is True
    assert settings.seed_fixture == tmp_path / "seed.json"


def test_unknown_storage_backend(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "redis")

    with pytest.raises(RuntimeError):
        Settings.from_env()


def test_build_storage_selects_backend():
    assert isinstance(build_storage(Settings(storage_backend="memory")), MemoryStorage)

    storage = build_storage(Settings(storage_backend="database", database_url="sqlite://"))
    assert isinstance(storage, SqlStorage)
    storage.close()
