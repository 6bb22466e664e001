"""Shared fixtures for dashboard tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from backend.config import Settings
from backend.core.fallback_handler import FallbackHandler
from backend.core.feature_service import FeatureService
from backend.tools.webhook_client import WebhookClient


def make_response(status_code: int = 200, body: Any = None, reason: str = "OK") -> MagicMock:
    """Build a stand-in for requests.Response."""
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.reason = reason
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def webhook() -> MagicMock:
    """WebhookClient double; set .post_json.return_value / .side_effect per test."""
    return MagicMock(spec=WebhookClient)


@pytest.fixture
def service(settings: Settings, webhook: MagicMock) -> FeatureService:
    return FeatureService(settings=settings, client=webhook, fallback_handler=FallbackHandler(enabled=True))


@pytest.fixture
def strict_service(settings: Settings, webhook: MagicMock) -> FeatureService:
    return FeatureService(settings=settings, client=webhook, fallback_handler=FallbackHandler(enabled=False))
