"""Settings loading from the environment."""

from oxytalk.config import APISettings, Settings


def test_nested_values_come_from_double_underscore_vars(monkeypatch):
    monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/chat")
    monkeypatch.setenv("MESSAGING__PERSIST_ATTEMPTS", "7")
    monkeypatch.setenv("API__CORS_ORIGINS", '["https://chat.example.com"]')

    settings = Settings()

    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/chat"
    assert settings.messaging.persist_attempts == 7
    assert settings.api.cors_origins == ["https://chat.example.com"]


def test_api_settings_only_configure_cors():
    assert set(APISettings.model_fields) == {"cors_origins"}
