# Role: Error taxonomy for webhook calls. Every failure the client can produce derives from WebhookError,
# so the fallback layer can catch one type while callers (API, CLI) can still tell the cases apart.

from __future__ import annotations

from typing import Optional


class WebhookError(Exception):
    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class WebhookNetworkError(WebhookError):
    """The request never produced an HTTP response (refused, DNS, timeout)."""


class WebhookStatusError(WebhookError):
    """The webhook answered with a status outside 200-299."""

    def __init__(self, status_code: int, status_text: str, *, url: Optional[str] = None) -> None:
        super().__init__(f"Webhook error: {status_text}", url=url)
        self.status_code = status_code
        self.status_text = status_text


class WebhookDecodeError(WebhookError):
    """The body was not JSON, or did not match the expected record shape."""
