import pytest

from api.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("TASKS_DATA_FILE", "CORS_ORIGINS", "LOG_LEVEL", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.data_file == "data/tasks.json"
    assert settings.cors_origins == ["*"]
    assert settings.log_level == "INFO"
    assert settings.host == "127.0.0.1"
    assert settings.port == 4000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TASKS_DATA_FILE", "/tmp/other.json")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, http://example.com ,")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "8080")

    settings = get_settings()

    assert settings.data_file == "/tmp/other.json"
    assert settings.cors_origins == ["http://localhost:3000", "http://example.com"]
    assert settings.log_level == "DEBUG"
    assert settings.port == 8080
