# Role: External tool adapter for automation-workflow webhooks. One POST with a JSON body, one parsed JSON body
# back. No retries and no backoff; failures are raised as WebhookError subclasses for the fallback layer to handle.

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

import backend.config as config
from backend.tools.errors import WebhookDecodeError, WebhookNetworkError, WebhookStatusError

logger = logging.getLogger(__name__)


class WebhookClient:
    HEADERS = {"Content-Type": "application/json"}

    def __init__(self, timeout_seconds: Optional[float] = None) -> None:
        # Key line: None means no timeout (a hung webhook keeps the caller waiting).
        self.timeout_seconds = timeout_seconds

    def post_json(self, url: str, payload: Any) -> Any:
        # 1) POST the payload as JSON
        # 2) Reject non-2xx with the status text
        # 3) Parse and return the JSON body
        if config.DEBUG:
            logger.debug("WEBHOOK REQUEST %s payload=%s", url, payload)

        try:
            r = requests.post(url, json=payload, headers=self.HEADERS, timeout=self.timeout_seconds)
        except requests.RequestException as e:
            raise WebhookNetworkError(f"Webhook request failed: {e}", url=url) from e

        if not 200 <= r.status_code < 300:
            raise WebhookStatusError(r.status_code, r.reason or str(r.status_code), url=url)

        try:
            body = r.json()
        except ValueError as e:
            raise WebhookDecodeError(f"Webhook returned invalid JSON: {e}", url=url) from e

        if config.DEBUG:
            logger.debug("WEBHOOK RESPONSE %s status=%s body=%s", url, r.status_code, body)

        return body
