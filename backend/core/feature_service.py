# backend/core/feature_service.py
# Role: Feature facade. One method per dashboard feature, each doing the same three steps:
# POST the feature payload to its configured webhook, decode the body into the typed record,
# and hand any WebhookError to the FallbackHandler (simulated record or propagate, per settings).

from __future__ import annotations

import base64
from typing import Any, Callable, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from backend.config import Settings, get_settings
from backend.core import mock_responses
from backend.core.fallback_handler import FallbackHandler
from backend.models.analysis import (
    AIResponse,
    CVData,
    CVOptimization,
    DecisionAnalysis,
    DocumentAnalysis,
    LearningPlan,
    ReportAnalysis,
)
from backend.models.feature import Feature
from backend.models.message import AIMessage
from backend.tools.errors import WebhookDecodeError
from backend.tools.webhook_client import WebhookClient

R = TypeVar("R", bound=BaseModel)

# Reply field names seen across chat webhook variants, in lookup order.
_REPLY_FIELDS = ("reply", "response", "content")


def _decode(record_type: Type[R], body: Any) -> R:
    try:
        return record_type.model_validate(body)
    except ValidationError as e:
        raise WebhookDecodeError(f"Unexpected {record_type.__name__} payload: {e}") from e


def _extract_reply(body: Any) -> str:
    if isinstance(body, dict):
        for field in _REPLY_FIELDS:
            value = body.get(field)
            if isinstance(value, str) and value.strip():
                return value
    raise WebhookDecodeError(f"Chat webhook response has none of {', '.join(_REPLY_FIELDS)}")


def _decode_dual_model(body: Any) -> AIResponse:
    # Expected: {primary: {content, model}, alternative: {content, model}, selectedModel}
    # Key line: both answers are required, so live and simulated responses fill the same fields.
    if not isinstance(body, dict):
        raise WebhookDecodeError("AI chat webhook response is not a JSON object")
    for key in ("primary", "alternative"):
        answer = body.get(key)
        if not isinstance(answer, dict) or not answer.get("content") or not answer.get("model"):
            raise WebhookDecodeError(f"AI chat webhook response is missing '{key}' content or model")

    primary = body["primary"]
    alternative = body["alternative"]
    return _decode(
        AIResponse,
        {
            "content": primary.get("content"),
            "model": body.get("selectedModel") or primary.get("model"),
            "alternativeContent": alternative.get("content"),
            "alternativeModel": alternative.get("model"),
        },
    )


class FeatureService:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[WebhookClient] = None,
        fallback_handler: Optional[FallbackHandler] = None,
    ) -> None:
        # Key line: dependencies are injectable for testing/mocking.
        self.settings = settings or get_settings()
        self.client = client or WebhookClient(timeout_seconds=self.settings.timeout_seconds)
        self.fallback_handler = fallback_handler or FallbackHandler(enabled=self.settings.fallback_enabled)

    def _call(self, feature: Feature, payload: dict, decode: Callable[[Any], Any], simulate: Callable[[], Any]):
        url = self.settings.endpoint_for(feature)
        return self.fallback_handler.run(
            feature,
            lambda: decode(self.client.post_json(url, payload)),
            simulate,
        )

    # ----------------------------
    # Chat
    # ----------------------------
    def assistant_reply(self, message: str) -> str:
        return self._call(
            Feature.CHAT,
            {"message": message},
            _extract_reply,
            lambda: mock_responses.mock_assistant_reply(message),
        )

    def send_ai_message(self, messages: Sequence[AIMessage]) -> AIResponse:
        return self._call(
            Feature.AI_CHAT,
            {"messages": [m.model_dump() for m in messages]},
            _decode_dual_model,
            lambda: mock_responses.mock_ai_response(messages),
        )

    # ----------------------------
    # Analysis panels
    # ----------------------------
    def analyze_decision(self, problem: str) -> DecisionAnalysis:
        return self._call(
            Feature.DECISION,
            {"problem": problem},
            lambda body: _decode(DecisionAnalysis, body),
            lambda: mock_responses.mock_decision_analysis(problem),
        )

    def analyze_document(self, content: str) -> DocumentAnalysis:
        return self._call(
            Feature.DOCUMENT,
            {"content": content},
            lambda body: _decode(DocumentAnalysis, body),
            lambda: mock_responses.mock_document_analysis(content),
        )

    def analyze_report(self, file_bytes: bytes, file_name: str) -> ReportAnalysis:
        # Key line: file content travels as base64 text inside the JSON body.
        file_data = base64.b64encode(file_bytes).decode("ascii")
        return self._call(
            Feature.REPORT,
            {"fileData": file_data, "fileName": file_name},
            lambda body: _decode(ReportAnalysis, body),
            mock_responses.mock_report_analysis,
        )

    def generate_learning_plan(self, skill: str) -> LearningPlan:
        return self._call(
            Feature.LEARNING_PLAN,
            {"skill": skill},
            lambda body: _decode(LearningPlan, body),
            lambda: mock_responses.mock_learning_plan(skill),
        )

    def optimize_cv(self, cv: CVData) -> CVOptimization:
        return self._call(
            Feature.CV,
            {"cvData": cv.model_dump(by_alias=True)},
            lambda body: _decode(CVOptimization, body),
            mock_responses.mock_cv_optimization,
        )
