"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from birddex.config import (
    AuthSettings,
    FeedSettings,
    GeocodingSettings,
    QuestSettings,
    Settings,
    StorageSettings,
)
from birddex.util.di.base import ProviderBase
from birddex.util.error import ConfigurationError

PLACEHOLDER_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_secrets(settings: Settings) -> Settings:
    """Refuse to run in production with placeholder secrets.

    Raises:
        ConfigurationError: If a secret still has its placeholder value
    """
    if settings.environment != "production":
        return settings
    placeholders = [
        name
        for name, value in (
            ("AUTH__JWT_SECRET", settings.auth.jwt_secret),
            ("AUTH__API_KEY", settings.auth.api_key),
            ("STORAGE__SERVICE_KEY", settings.storage.service_key),
        )
        if value == PLACEHOLDER_SECRET
    ]
    if placeholders:
        raise ConfigurationError(f"Set {', '.join(placeholders)} for production")
    return settings


class ProdConfigProvider(ProviderBase):
    """Config provider. Settings are loaded from the environment and .env."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return check_secrets(Settings())

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        return settings.storage

    @provide
    def provide_geocoding_settings(self, settings: Settings) -> GeocodingSettings:
        return settings.geocoding

    @provide
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        return settings.feed

    @provide
    def provide_quest_settings(self, settings: Settings) -> QuestSettings:
        return settings.quests
