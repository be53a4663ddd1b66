"""Configuration provider."""

from dishka import Scope, provide

from oxytalk.config import AuthSettings, MessagingSettings, Settings
from oxytalk.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Provides Settings and its sections.

    Settings are read from the environment unless an instance is passed in,
    which is how tests pin values like the persistence retry delay.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return self._settings if self._settings is not None else Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_messaging_settings(self, settings: Settings) -> MessagingSettings:
        return settings.messaging
