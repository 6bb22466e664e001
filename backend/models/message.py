# Role: Chat message schemas. ChatMessage is the UI-side record appended to a ChatSession
# (id + role + content + created_at); AIMessage is the wire form sent to the dual-model chat webhook.

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant"]
WireRole = Literal["user", "assistant", "system"]


def _new_message_id() -> str:
    return uuid.uuid4().hex


class ChatMessage(BaseModel):
    # Key line: frozen, messages are never edited after they are appended.
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_message_id)
    role: Role
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class AIMessage(BaseModel):
    role: WireRole
    content: str
