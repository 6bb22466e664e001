# Role: Chat view state for one UI session (idle <-> awaiting-response). Owns the ordered message list,
# the busy flag that blocks overlapping sends, and the short-lived "copied" indicator.
# Pure Python so the Streamlit page and the CLI share the same transitions.

from __future__ import annotations

import time
from typing import Callable, List, Optional

from backend.models.message import ChatMessage

COPY_RESET_SECONDS = 1.5


class ChatSession:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.messages: List[ChatMessage] = []
        self.is_loading = False
        self._clock = clock
        self._copied_id: Optional[str] = None
        self._copied_at: float = 0.0

    def can_send(self, text: Optional[str]) -> bool:
        return bool(text and text.strip()) and not self.is_loading

    def begin(self, text: Optional[str]) -> Optional[ChatMessage]:
        # 1) Guard: blank input or a pending request -> no-op
        # 2) Append the trimmed user message
        # 3) Enter awaiting-response
        if not self.can_send(text):
            return None
        user_msg = ChatMessage(role="user", content=text.strip())
        self.messages.append(user_msg)
        self.is_loading = True
        return user_msg

    def complete(self, reply: str) -> ChatMessage:
        # Key line: exactly one assistant message per settled send.
        assistant_msg = ChatMessage(role="assistant", content=reply)
        self.messages.append(assistant_msg)
        self.is_loading = False
        return assistant_msg

    def abort(self) -> None:
        self.is_loading = False

    def send(self, text: Optional[str], responder: Callable[[str], str]) -> Optional[ChatMessage]:
        """
        Run one full turn: append the user message, ask responder for a reply, append it.
        Returns the assistant message, or None when the send was ignored.
        If responder raises, the session returns to idle and the error propagates.
        """
        user_msg = self.begin(text)
        if user_msg is None:
            return None

        try:
            reply = responder(user_msg.content)
        except Exception:
            self.abort()
            raise
        return self.complete(reply)

    def clear(self) -> None:
        self.messages = []
        self.is_loading = False
        self._copied_id = None

    # ----------------------------
    # Copy indicator
    # ----------------------------
    def mark_copied(self, message_id: str) -> None:
        self._copied_id = message_id
        self._copied_at = self._clock()

    @property
    def copied_id(self) -> Optional[str]:
        if self._copied_id is None:
            return None
        if self._clock() - self._copied_at >= COPY_RESET_SECONDS:
            self._copied_id = None
        return self._copied_id

    def is_copied(self, message_id: str) -> bool:
        return self.copied_id == message_id
