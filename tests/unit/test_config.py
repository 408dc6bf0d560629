"""Test Settings loading and validation."""

import pytest
from pydantic import ValidationError

import crm_sales.domain as domain
from crm_sales.config import Settings, get_settings, load_settings
from crm_sales.errors import ConfigError


class TestSettingsDefaults:
    def test_default_settings(self):
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.debug is False
        assert "%(levelname)s" in settings.log_format

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestSettingsFromEnvironment:
    def test_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("CRM_SALES_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("CRM_SALES_DEBUG", "true")

        settings = Settings()
        assert settings.log_level == "WARNING"
        assert settings.debug is True

    def test_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("CRM_SALES_LOG_LEVEL", " debug ")
        assert Settings().log_level == "DEBUG"

    def test_unprefixed_variables_ignored(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert Settings().log_level == "INFO"

    def test_invalid_level_raises(self, monkeypatch):
        monkeypatch.setenv("CRM_SALES_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings()


class TestConfigError:
    def test_lives_outside_the_domain_hierarchy(self):
        assert not issubclass(ConfigError, domain.DomainError)
        assert not hasattr(domain, "ConfigError")


class TestLoadSettings:
    def test_returns_cached_settings(self):
        assert load_settings() is get_settings()

    def test_invalid_value_becomes_config_error(self, monkeypatch):
        monkeypatch.setenv("CRM_SALES_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_settings()
