# Role: Thin HTTP adapter for the chat endpoints. Validates request/response shapes and delegates the call
# to FeatureService (webhook + fallback logic lives in core, not in the API layer).

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from backend.api.deps import get_feature_service
from backend.api.errors import webhook_errors_as_http
from backend.core.feature_service import FeatureService
from backend.models.analysis import AIResponse
from backend.models.message import AIMessage

router = APIRouter(tags=["chat"])


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, pattern=r"\S")


class ChatResponse(BaseModel):
    reply: str


class AIChatRequest(BaseModel):
    messages: List[AIMessage] = Field(..., min_length=1)


@router.post("/chat", response_model=ChatResponse)
def chat(req: ChatRequest, service: FeatureService = Depends(get_feature_service)) -> ChatResponse:
    # 1) Forward the single user message to the assistant webhook
    # 2) Return the reply text in a stable schema for UI/clients
    with webhook_errors_as_http():
        reply = service.assistant_reply(req.message.strip())
    return ChatResponse(reply=reply)


@router.post("/ai-chat", response_model=AIResponse)
def ai_chat(req: AIChatRequest, service: FeatureService = Depends(get_feature_service)) -> AIResponse:
    with webhook_errors_as_http():
        return service.send_ai_message(req.messages)
