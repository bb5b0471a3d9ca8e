"""Unit tests for settings loading."""

import pytest

from birddex.config import AuthSettings, Settings, StorageSettings
from birddex.util.di.core import check_secrets
from birddex.util.error import ConfigurationError


class TestCheckSecrets:
    def test_placeholders_allowed_outside_production(self):
        settings = Settings(environment="development")

        assert check_secrets(settings) is settings

    def test_production_rejects_placeholders(self):
        settings = Settings(
            environment="production",
            auth=AuthSettings(jwt_secret="s3cret", api_key="anon"),
        )

        with pytest.raises(ConfigurationError, match="STORAGE__SERVICE_KEY"):
            check_secrets(settings)

    def test_production_with_real_secrets(self):
        settings = Settings(
            environment="production",
            host="api.birddex.app",
            auth=AuthSettings(jwt_secret="s3cret", api_key="anon"),
            storage=StorageSettings(service_key="service"),
        )

        assert check_secrets(settings).api.base_url == "https://api.birddex.app"
