"""Tests for the chat view state machine and copy indicator."""

from unittest.mock import MagicMock

import pytest

from backend.core.chat_session import COPY_RESET_SECONDS, ChatSession
from backend.core.fallback_handler import FallbackHandler
from backend.core.feature_service import FeatureService
from backend.tools.errors import WebhookNetworkError


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_send_appends_user_then_assistant() -> None:
    chat = ChatSession()

    reply = chat.send("  Hello  ", lambda text: f"echo {text}")

    assert [m.role for m in chat.messages] == ["user", "assistant"]
    assert chat.messages[0].content == "Hello"
    assert reply.content == "echo Hello"
    assert chat.is_loading is False


def test_user_message_is_appended_before_the_reply_arrives() -> None:
    chat = ChatSession()
    seen = []

    def responder(text: str) -> str:
        seen.append((len(chat.messages), chat.is_loading))
        return "ok"

    chat.send("hi", responder)
    assert seen == [(1, True)]


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_blank_input_is_a_no_op(text) -> None:
    chat = ChatSession()
    responder = MagicMock()

    assert chat.send(text, responder) is None
    assert chat.messages == []
    responder.assert_not_called()


def test_send_while_awaiting_is_a_no_op() -> None:
    chat = ChatSession()
    assert chat.begin("first") is not None
    responder = MagicMock()

    assert chat.send("second", responder) is None
    assert len(chat.messages) == 1
    responder.assert_not_called()

    chat.complete("answer")
    assert [m.content for m in chat.messages] == ["first", "answer"]


def test_failed_responder_returns_to_idle_and_propagates() -> None:
    chat = ChatSession()

    def boom(text: str) -> str:
        raise ConnectionError("backend down")

    with pytest.raises(ConnectionError):
        chat.send("hi", boom)

    assert [m.role for m in chat.messages] == ["user"]
    assert chat.is_loading is False
    assert chat.can_send("again")


def test_unreachable_webhook_still_yields_one_assistant_message(settings) -> None:
    webhook = MagicMock()
    webhook.post_json.side_effect = WebhookNetworkError("refused")
    service = FeatureService(settings=settings, client=webhook, fallback_handler=FallbackHandler(enabled=True))
    chat = ChatSession()

    chat.send("Explain microservices", service.assistant_reply)

    assert [m.role for m in chat.messages] == ["user", "assistant"]
    assert chat.messages[-1].content == 'Simulated response to: "Explain microservices..."'


def test_message_ids_are_unique() -> None:
    chat = ChatSession()
    for i in range(5):
        chat.send(f"msg {i}", lambda text: "ok")

    ids = [m.id for m in chat.messages]
    assert len(set(ids)) == len(ids)


def test_copied_indicator_targets_one_message_and_expires() -> None:
    clock = FakeClock()
    chat = ChatSession(clock=clock)
    chat.send("a", lambda text: "first")
    chat.send("b", lambda text: "second")
    first, second = chat.messages[1], chat.messages[3]

    chat.mark_copied(first.id)
    assert chat.is_copied(first.id)
    assert not chat.is_copied(second.id)

    clock.now += COPY_RESET_SECONDS - 0.1
    assert chat.copied_id == first.id

    clock.now += 0.2
    assert chat.copied_id is None


def test_copying_another_message_moves_the_indicator() -> None:
    clock = FakeClock()
    chat = ChatSession(clock=clock)
    chat.mark_copied("one")
    clock.now += 1.0
    chat.mark_copied("two")
    clock.now += 1.0

    assert chat.copied_id == "two"


def test_clear_resets_session() -> None:
    chat = ChatSession()
    chat.send("hi", lambda text: "ok")
    chat.mark_copied(chat.messages[1].id)
    chat.clear()

    assert chat.messages == []
    assert chat.is_loading is False
    assert chat.copied_id is None
