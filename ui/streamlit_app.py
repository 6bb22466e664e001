# Role: Streamlit dashboard UI.
# - Backend is authoritative (every panel calls the API).
# - Sidebar switches between the assistant chat and the analysis panels.

from __future__ import annotations

import json
import sys
from pathlib import Path

# Project root on sys.path when launched as: streamlit run ui/streamlit_app.py
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import requests
import streamlit as st
import streamlit.components.v1 as components

from backend.core.chat_session import ChatSession
from ui.api_client import BackendClient
from ui.panels import (
    render_cv_page,
    render_decision_page,
    render_document_page,
    render_learning_page,
    render_report_page,
)

SUGGESTED_PROMPTS = [
    "Explain the concept of microservices architecture",
    "Create a project plan for a mobile app",
    "What are the best practices for API design?",
    "Help me optimize my React application performance",
]

# Message list redraw interval; keeps the "Copied" label from outliving COPY_RESET_SECONDS by much.
COPY_REFRESH_SECONDS = 0.5

PAGES = {
    "🤖 AI Assistant": None,
    "⚖️ Decision Analysis": render_decision_page,
    "📄 Document Analysis": render_document_page,
    "📊 Report Analysis": render_report_page,
    "🎓 Learning Plan": render_learning_page,
    "📝 CV Optimization": render_cv_page,
}


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> None:
    if "chat" not in st.session_state:
        st.session_state["chat"] = ChatSession()
    if "draft" not in st.session_state:
        st.session_state["draft"] = ""
    if "client" not in st.session_state:
        st.session_state["client"] = BackendClient()


# ----------------------------
# UI polish
# ----------------------------
def inject_css() -> None:
    st.markdown(
        """
<style>
.block-container { max-width: 1200px; padding-top: 2rem; padding-bottom: 2rem; }

.stButton>button {
  border-radius: 12px !important;
  padding: 0.45rem 0.90rem !important;
  font-weight: 650 !important;
}

/* Suggested prompt buttons read as cards */
.ad-suggestions .stButton>button {
  width: 100%;
  text-align: left;
  min-height: 64px;
}

div[data-testid="stTextArea"] textarea { min-height: 64px; }
</style>
""",
        unsafe_allow_html=True,
    )


def copy_to_clipboard(text: str) -> None:
    # Browser-side write; Streamlit has no clipboard API of its own.
    components.html(
        f"<script>navigator.clipboard.writeText({json.dumps(text)});</script>",
        height=0,
    )


# ----------------------------
# Callbacks (run before the next script pass)
# ----------------------------
def _use_prompt(prompt: str) -> None:
    st.session_state["draft"] = prompt


def _on_send() -> None:
    chat: ChatSession = st.session_state["chat"]
    client: BackendClient = st.session_state["client"]
    text = st.session_state.get("draft", "")
    if not chat.can_send(text):
        return

    st.session_state["draft"] = ""
    try:
        with st.spinner("Thinking..."):
            chat.send(text, client.chat)
    except requests.RequestException:
        # Key line: the user message stays, no assistant message for this turn.
        st.session_state["chat_failed"] = True


def _on_copy(message_id: str, content: str) -> None:
    chat: ChatSession = st.session_state["chat"]
    chat.mark_copied(message_id)
    st.session_state["clipboard_text"] = content


# ----------------------------
# Assistant chat
# ----------------------------
def render_empty_state() -> None:
    st.markdown("### ✨ How can I help you today?")
    st.markdown('<div class="ad-suggestions">', unsafe_allow_html=True)
    cols = st.columns(2)
    for i, prompt in enumerate(SUGGESTED_PROMPTS):
        with cols[i % 2]:
            st.button(prompt, key=f"suggest-{i}", on_click=_use_prompt, args=(prompt,), use_container_width=True)
    st.markdown("</div>", unsafe_allow_html=True)


def copy_label(chat: ChatSession, message_id: str) -> str:
    return "✓ Copied" if chat.is_copied(message_id) else "Copy"


@st.fragment(run_every=COPY_REFRESH_SECONDS)
def render_messages() -> None:
    # Key line: a fragment reruns on its own timer, so the copied indicator clears without user input.
    chat: ChatSession = st.session_state["chat"]

    pending_copy = st.session_state.pop("clipboard_text", None)
    if pending_copy is not None:
        copy_to_clipboard(pending_copy)
        st.toast("Copied", icon="✅")

    for msg in chat.messages:
        with st.chat_message(msg.role):
            st.write(msg.content)
            if msg.role == "assistant":
                st.button(copy_label(chat, msg.id), key=f"copy-{msg.id}", on_click=_on_copy, args=(msg.id, msg.content))


def render_assistant_page() -> None:
    st.header("AI Personal Assistant")
    st.caption("Powered by n8n automation")

    chat: ChatSession = st.session_state["chat"]

    if st.session_state.pop("chat_failed", False):
        st.toast("AI response failed", icon="⚠️")

    if not chat.messages:
        render_empty_state()
    else:
        render_messages()

    if chat.is_loading:
        st.caption("Thinking...")

    with st.form("chat_form"):
        st.text_area("Message", key="draft", placeholder="Type your message...", label_visibility="collapsed")
        st.form_submit_button("Send ➤", on_click=_on_send, disabled=chat.is_loading)


# ----------------------------
# Sidebar
# ----------------------------
def render_sidebar() -> str:
    st.sidebar.title("AI Dashboard")
    page = st.sidebar.radio("Navigate", list(PAGES.keys()), label_visibility="collapsed")

    st.sidebar.divider()
    if st.sidebar.button("📝 New chat", use_container_width=True):
        st.session_state["chat"].clear()
        st.rerun()

    cfg = st.session_state["client"].fetch_config()
    if cfg is None:
        st.sidebar.warning("Backend not reachable.")
    elif cfg.get("fallback_enabled"):
        st.sidebar.caption("Simulated responses are used when a webhook is unavailable.")
    return page


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="AI Dashboard", page_icon="🤖", layout="wide")
    inject_css()
    ensure_session()

    page = render_sidebar()
    render = PAGES[page]
    if render is None:
        render_assistant_page()
    else:
        render(st.session_state["client"])


if __name__ == "__main__":
    main()
