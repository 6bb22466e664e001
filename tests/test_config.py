"""Tests for settings loading."""

from backend.config import DEFAULT_ENDPOINTS, Settings
from backend.models.feature import Feature

_ENV_VARS = [f.env_var for f in Feature] + ["WEBHOOK_FALLBACK_ENABLED", "WEBHOOK_TIMEOUT_SECONDS"]


def _clear_env(monkeypatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults(monkeypatch) -> None:
    _clear_env(monkeypatch)

    settings = Settings.from_env()
    assert settings.endpoints == DEFAULT_ENDPOINTS
    assert settings.fallback_enabled is True
    assert settings.timeout_seconds is None


def test_every_feature_has_an_endpoint() -> None:
    settings = Settings()
    for feature in Feature:
        assert settings.endpoint_for(feature).startswith("http")


def test_settings_overrides(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("WEBHOOK_DECISION_URL", "https://n8n.example.com/webhook/decide")
    monkeypatch.setenv("WEBHOOK_FALLBACK_ENABLED", "false")
    monkeypatch.setenv("WEBHOOK_TIMEOUT_SECONDS", "12.5")

    settings = Settings.from_env()
    assert settings.endpoint_for(Feature.DECISION) == "https://n8n.example.com/webhook/decide"
    assert settings.endpoint_for(Feature.CV) == DEFAULT_ENDPOINTS[Feature.CV]
    assert settings.fallback_enabled is False
    assert settings.timeout_seconds == 12.5


def test_non_positive_timeout_means_no_timeout(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("WEBHOOK_TIMEOUT_SECONDS", "0")

    assert Settings.from_env().timeout_seconds is None


def test_env_var_names() -> None:
    assert Feature.LEARNING_PLAN.env_var == "WEBHOOK_LEARNING_PLAN_URL"
    assert Feature.AI_CHAT.env_var == "WEBHOOK_AI_CHAT_URL"
