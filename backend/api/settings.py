# Role: Read-only transparency endpoint for the UI.
# Shows which webhook each feature talks to and whether simulated responses are enabled.

from typing import Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from backend.api.deps import get_feature_service
from backend.core.feature_service import FeatureService

router = APIRouter(tags=["config"])


class ConfigSnapshot(BaseModel):
    endpoints: Dict[str, str]
    fallback_enabled: bool
    timeout_seconds: Optional[float]


@router.get("/config", response_model=ConfigSnapshot)
def get_config(service: FeatureService = Depends(get_feature_service)) -> ConfigSnapshot:
    settings = service.settings
    return ConfigSnapshot(
        endpoints={feature.value: url for feature, url in settings.endpoints.items()},
        fallback_enabled=settings.fallback_enabled,
        timeout_seconds=settings.timeout_seconds,
    )
