# Role: HTTP adapters for the analysis panels (decision, document, report, learning plan, CV).
# Each endpoint validates input, calls one FeatureService method and returns its record as camelCase JSON.

import base64
import binascii

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backend.api.deps import get_feature_service
from backend.api.errors import webhook_errors_as_http
from backend.core.feature_service import FeatureService
from backend.models.analysis import (
    CVData,
    CVOptimization,
    DecisionAnalysis,
    DocumentAnalysis,
    LearningPlan,
    ReportAnalysis,
)

router = APIRouter(tags=["analysis"])

_NON_BLANK = r"\S"


class DecisionRequest(BaseModel):
    problem: str = Field(..., pattern=_NON_BLANK)


class DocumentRequest(BaseModel):
    content: str = Field(..., pattern=_NON_BLANK)


class ReportRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    file_data: str = Field(..., description="Base64-encoded file content")
    file_name: str = Field(..., pattern=_NON_BLANK)


class LearningPlanRequest(BaseModel):
    skill: str = Field(..., pattern=_NON_BLANK)


class CVRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    cv_data: CVData


@router.post("/decision", response_model=DecisionAnalysis)
def analyze_decision(req: DecisionRequest, service: FeatureService = Depends(get_feature_service)) -> DecisionAnalysis:
    with webhook_errors_as_http():
        return service.analyze_decision(req.problem.strip())


@router.post("/document", response_model=DocumentAnalysis)
def analyze_document(req: DocumentRequest, service: FeatureService = Depends(get_feature_service)) -> DocumentAnalysis:
    with webhook_errors_as_http():
        return service.analyze_document(req.content)


@router.post("/report", response_model=ReportAnalysis)
def analyze_report(req: ReportRequest, service: FeatureService = Depends(get_feature_service)) -> ReportAnalysis:
    # Key line: decode here so a bad upload is a 422, not a webhook failure.
    try:
        file_bytes = base64.b64decode(req.file_data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"fileData is not valid base64: {e}") from e

    with webhook_errors_as_http():
        return service.analyze_report(file_bytes, req.file_name.strip())


@router.post("/learning-plan", response_model=LearningPlan)
def generate_learning_plan(
    req: LearningPlanRequest, service: FeatureService = Depends(get_feature_service)
) -> LearningPlan:
    with webhook_errors_as_http():
        return service.generate_learning_plan(req.skill.strip())


@router.post("/cv", response_model=CVOptimization)
def optimize_cv(req: CVRequest, service: FeatureService = Depends(get_feature_service)) -> CVOptimization:
    with webhook_errors_as_http():
        return service.optimize_cv(req.cv_data)
