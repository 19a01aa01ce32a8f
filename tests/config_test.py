"""Environment-based settings."""

import pytest

from receipt_processor.config import DEFAULT_PORT, Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch, tmp_path):
    for name in ("RECEIPT_HOST", "RECEIPT_PORT", "RECEIPT_LOG_LEVEL", "RECEIPT_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings(str(tmp_path / "missing.env"))

    assert settings == Settings()
    assert settings.port == 3000
    assert settings.allows_any_origin


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RECEIPT_HOST", "127.0.0.1")
    monkeypatch.setenv("RECEIPT_PORT", "8080")
    monkeypatch.setenv("RECEIPT_LOG_LEVEL", "debug")
    monkeypatch.setenv("RECEIPT_CORS_ORIGINS", "http://a.test, http://b.test")

    settings = get_settings(str(tmp_path / "missing.env"))

    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("http://a.test", "http://b.test")
    assert not settings.allows_any_origin


@pytest.mark.parametrize("port", ["not-a-port", "0", "70000"])
def test_invalid_port_falls_back(monkeypatch, tmp_path, port):
    monkeypatch.setenv("RECEIPT_PORT", port)
    assert get_settings(str(tmp_path / "missing.env")).port == DEFAULT_PORT


def test_unknown_log_level_falls_back(monkeypatch, tmp_path):
    monkeypatch.setenv("RECEIPT_LOG_LEVEL", "chatty")
    assert get_settings(str(tmp_path / "missing.env")).log_level == "INFO"


def test_dotenv_file_does_not_override_environment(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("RECEIPT_PORT=9000\nRECEIPT_HOST=10.0.0.1\n", encoding="utf-8")
    monkeypatch.setenv("RECEIPT_PORT", "8081")
    monkeypatch.delenv("RECEIPT_HOST", raising=False)

    settings = get_settings(str(env_file))

    assert settings.port == 8081
    assert settings.host == "10.0.0.1"
