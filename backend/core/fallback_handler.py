# Role: Recovery path when a webhook call breaks. Applies the "fallback-to-simulated-response" policy:
# on -> log and return the deterministic mock; off -> let the WebhookError reach the caller.

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from backend.models.feature import Feature
from backend.tools.errors import WebhookError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FallbackHandler:
    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def run(self, feature: Feature, call: Callable[[], T], simulate: Callable[[], T]) -> T:
        # 1) Try the live call
        # 2) On WebhookError: re-raise if fallback is off
        # 3) Otherwise substitute the simulated record (same type as a live one)
        try:
            return call()
        except WebhookError as e:
            if not self.enabled:
                raise
            return self.recover(feature, e, simulate)

    def recover(self, feature: Feature, error: Optional[WebhookError], simulate: Callable[[], T]) -> T:
        logger.warning("%s webhook failed, using simulated response: %s", feature.value, error)
        return simulate()
