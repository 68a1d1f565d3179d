"""Tests for environment-driven settings."""

import pytest

from cms_comparison.config.settings import Environment, LogLevel, Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("CMS_REPO_BASE_URL", "CMS_LIST_PATH", "HTTP_TIMEOUT_S", "ENVIRONMENT"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.CMS_REPO_BASE_URL.endswith("/")
        assert settings.CMS_LIST_PATH == "cms-list.json"
        assert settings.HTTP_TIMEOUT_S == 30.0
        assert settings.ENVIRONMENT == Environment.DEV

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CMS_REPO_BASE_URL", "https://mirror.test/")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ENVIRONMENT", "prod")
        settings = get_settings()
        assert settings.CMS_REPO_BASE_URL == "https://mirror.test/"
        assert settings.LOG_LEVEL == LogLevel.DEBUG
        assert settings.ENVIRONMENT == Environment.PROD

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            Settings(HTTP_TIMEOUT_S=0)
