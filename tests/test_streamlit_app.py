"""Tests for the assistant page's copy indicator wiring."""

from backend.core.chat_session import COPY_RESET_SECONDS, ChatSession
from ui.streamlit_app import COPY_REFRESH_SECONDS, copy_label


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_message_list_redraws_faster_than_the_copy_reset() -> None:
    assert 0 < COPY_REFRESH_SECONDS < COPY_RESET_SECONDS


def test_copy_label_reverts_without_another_click() -> None:
    clock = FakeClock()
    chat = ChatSession(clock=clock)
    chat.send("hi", lambda text: "ok")
    reply_id = chat.messages[1].id

    chat.mark_copied(reply_id)
    assert copy_label(chat, reply_id) == "✓ Copied"

    # One timed redraw after the reset window elapses shows the plain label again.
    clock.now += COPY_RESET_SECONDS + COPY_REFRESH_SECONDS
    assert copy_label(chat, reply_id) == "Copy"


def test_copy_label_only_marks_the_copied_message() -> None:
    chat = ChatSession()
    chat.send("a", lambda text: "first")
    chat.send("b", lambda text: "second")

    chat.mark_copied(chat.messages[1].id)

    assert copy_label(chat, chat.messages[3].id) == "Copy"
