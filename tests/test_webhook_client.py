"""Tests for the webhook HTTP client."""

import logging
from unittest.mock import patch

import pytest
import requests

import backend.config as config
from backend.tools.errors import WebhookDecodeError, WebhookError, WebhookNetworkError, WebhookStatusError
from backend.tools.webhook_client import WebhookClient
from tests.conftest import make_response

URL = "http://localhost:5678/webhook/test"


def test_posts_json_and_returns_body() -> None:
    with patch("backend.tools.webhook_client.requests.post", return_value=make_response(body={"reply": "hi"})) as post:
        body = WebhookClient().post_json(URL, {"message": "hello"})

    assert body == {"reply": "hi"}
    post.assert_called_once_with(
        URL,
        json={"message": "hello"},
        headers={"Content-Type": "application/json"},
        timeout=None,
    )


def test_passes_configured_timeout() -> None:
    with patch("backend.tools.webhook_client.requests.post", return_value=make_response(body={})) as post:
        WebhookClient(timeout_seconds=5).post_json(URL, {})

    assert post.call_args.kwargs["timeout"] == 5


def test_non_2xx_raises_status_error() -> None:
    resp = make_response(status_code=500, body={}, reason="Internal Server Error")
    with patch("backend.tools.webhook_client.requests.post", return_value=resp):
        with pytest.raises(WebhookStatusError) as exc_info:
            WebhookClient().post_json(URL, {})

    assert exc_info.value.status_code == 500
    assert str(exc_info.value) == "Webhook error: Internal Server Error"
    assert exc_info.value.url == URL


def test_network_failure_raises_network_error() -> None:
    with patch("backend.tools.webhook_client.requests.post", side_effect=requests.ConnectionError("refused")):
        with pytest.raises(WebhookNetworkError):
            WebhookClient().post_json(URL, {})


def test_invalid_json_raises_decode_error() -> None:
    resp = make_response(body=ValueError("Expecting value"))
    with patch("backend.tools.webhook_client.requests.post", return_value=resp):
        with pytest.raises(WebhookDecodeError):
            WebhookClient().post_json(URL, {})


def test_all_failures_share_a_base_class() -> None:
    for cls in (WebhookNetworkError, WebhookStatusError, WebhookDecodeError):
        assert issubclass(cls, WebhookError)


def test_debug_mode_logs_request_and_response(monkeypatch, caplog) -> None:
    monkeypatch.setattr(config, "DEBUG", True)
    caplog.set_level(logging.DEBUG, logger="backend.tools.webhook_client")

    with patch("backend.tools.webhook_client.requests.post", return_value=make_response(body={"reply": "hi"})):
        WebhookClient().post_json(URL, {"message": "hello"})

    assert f"WEBHOOK REQUEST {URL}" in caplog.text
    assert "'message': 'hello'" in caplog.text
    assert f"WEBHOOK RESPONSE {URL} status=200" in caplog.text


def test_debug_logging_is_silent_when_debug_is_off(monkeypatch, caplog) -> None:
    monkeypatch.setattr(config, "DEBUG", False)
    caplog.set_level(logging.DEBUG, logger="backend.tools.webhook_client")

    with patch("backend.tools.webhook_client.requests.post", return_value=make_response(body={})):
        WebhookClient().post_json(URL, {})

    assert "WEBHOOK" not in caplog.text
