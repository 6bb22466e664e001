# Role: Shared dependencies for API routers. A single FeatureService per process, built lazily so
# load_env() has run before settings are resolved. Tests swap it out via app.dependency_overrides.

from __future__ import annotations

from functools import lru_cache

from backend.core.feature_service import FeatureService


@lru_cache
def get_feature_service() -> FeatureService:
    return FeatureService()
