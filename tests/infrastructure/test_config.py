"""Tests for environment-driven settings."""

from pathlib import Path

from contratia.domain.model.order import OrderKind
from contratia.infrastructure.config import DEFAULT_DATA_DIR, DEFAULT_TIMEOUT, Settings

VARIABLES = (
    "CONTRATIA_DATA_DIR",
    "MAKE_WEBHOOK_MUSIC",
    "MAKE_WEBHOOK_BOOTH",
    "MAKE_WEBHOOK_DJ",
    "CONTRATIA_AI_ENDPOINT",
    "CONTRATIA_HTTP_TIMEOUT",
    "CONTRATIA_LOG_LEVEL",
)


def _clear(monkeypatch):
    # setenv first so every variable, even one loaded from .env, is restored afterwards
    for name in VARIABLES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestSettingsFromEnv:

    def test_defaults(self, monkeypatch):
        _clear(monkeypatch)
        settings = Settings.from_env(load_dotenv_file=False)
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.http_timeout == DEFAULT_TIMEOUT
        assert settings.log_level == "WARNING"
        assert settings.webhook_url(OrderKind.MUSIC) == ""

    def test_reads_variables(self, monkeypatch, tmp_path):
        _clear(monkeypatch)
        monkeypatch.setenv("CONTRATIA_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("MAKE_WEBHOOK_DJ", " https://hook.example.com/dj ")
        monkeypatch.setenv("CONTRATIA_AI_ENDPOINT", "https://ai.example.com")
        monkeypatch.setenv("CONTRATIA_HTTP_TIMEOUT", "12.5")
        monkeypatch.setenv("CONTRATIA_LOG_LEVEL", "info")
        settings = Settings.from_env(load_dotenv_file=False)
        assert settings.data_dir == Path(tmp_path)
        assert settings.webhook_url(OrderKind.DJ) == "https://hook.example.com/dj"
        assert settings.ai_endpoint == "https://ai.example.com"
        assert settings.http_timeout == 12.5
        assert settings.log_level == "INFO"

    def test_bad_timeout_falls_back(self, monkeypatch):
        _clear(monkeypatch)
        monkeypatch.setenv("CONTRATIA_HTTP_TIMEOUT", "soon")
        assert Settings.from_env(load_dotenv_file=False).http_timeout == DEFAULT_TIMEOUT

    def test_dotenv_file(self, monkeypatch, tmp_path):
        _clear(monkeypatch)
        (tmp_path / ".env").write_text("MAKE_WEBHOOK_BOOTH=https://hook.example.com/booth\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        settings = Settings.from_env()
        assert settings.webhook_url(OrderKind.BOOTH) == "https://hook.example.com/booth"
