# Role: Central configuration module. Loads .env into environment variables, computes runtime flags (DEBUG),
# configures logging, and resolves one named webhook endpoint per feature (no URLs embedded in call sites).

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from backend.models.feature import Feature

DEBUG: bool = False

_TRUTHY = {"1", "true", "yes", "on"}

# Local n8n host defaults; override per feature with WEBHOOK_<FEATURE>_URL.
DEFAULT_ENDPOINTS: Dict[Feature, str] = {
    Feature.CHAT: "http://localhost:5678/webhook/122eb549-8506-4c2f-ac63-94aa081c0956/chat",
    Feature.AI_CHAT: "http://localhost:5678/webhook/23030f54-6f01-4ed3-be3c-e3237f08f5e0/chat",
    Feature.DECISION: "http://localhost:5678/webhook/gemini-webhook",
    Feature.DOCUMENT: "http://localhost:5678/webhook/document-analysis",
    Feature.REPORT: "http://localhost:5678/webhook/report-analysis",
    Feature.LEARNING_PLAN: "http://localhost:5678/webhook/learning-plan",
    Feature.CV: "http://localhost:5678/webhook/cv-optimize",
}


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG and the logging level.
    This makes DEBUG correct even if load_env() is called after import.
    """
    global DEBUG
    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}

    default_level = "DEBUG" if DEBUG else "INFO"
    level_name = os.getenv("LOG_LEVEL", default_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Keep connection-pool chatter out of DEBUG output.
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def _env_timeout(name: str) -> Optional[float]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    value = float(raw)
    return value if value > 0 else None


class Settings(BaseModel):
    endpoints: Dict[Feature, str] = Field(default_factory=lambda: dict(DEFAULT_ENDPOINTS))

    # Key line: "fallback-to-simulated-response" switch. Off means webhook errors reach the caller.
    fallback_enabled: bool = True

    # None = wait indefinitely (single best-effort call).
    timeout_seconds: Optional[float] = None

    @classmethod
    def from_env(cls) -> "Settings":
        # 1) Start from defaults
        # 2) Overlay WEBHOOK_<FEATURE>_URL per feature
        # 3) Read fallback switch and optional timeout
        endpoints = dict(DEFAULT_ENDPOINTS)
        for feature in Feature:
            override = (os.getenv(feature.env_var) or "").strip()
            if override:
                endpoints[feature] = override

        return cls(
            endpoints=endpoints,
            fallback_enabled=_env_flag("WEBHOOK_FALLBACK_ENABLED", "1"),
            timeout_seconds=_env_timeout("WEBHOOK_TIMEOUT_SECONDS"),
        )

    def endpoint_for(self, feature: Feature) -> str:
        return self.endpoints[feature]


@lru_cache
def get_settings() -> Settings:
    # Resolved once at startup; call load_env() first so .env values are visible.
    return Settings.from_env()
