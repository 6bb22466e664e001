# Role: Local developer CLI to exercise the feature facade without the web UI or API server.
# Useful for checking webhook wiring and seeing debug logs in the terminal.

from __future__ import annotations

from pathlib import Path

import backend.config
backend.config.load_env()

from backend.core.chat_session import ChatSession
from backend.core.feature_service import FeatureService
from backend.tools.errors import WebhookError

HELP = (
    "Commands: /decision <text>, /document <path>, /report <path>, /learn <skill>,\n"
    "          /history, /new (clear chat), /exit"
)


def _print_list(title: str, items: list) -> None:
    print(f"{title}:")
    for item in items:
        print(f"  - {item}")


def _run_command(service: FeatureService, cmd: str, arg: str) -> None:
    # 1) Dispatch one slash-command to the facade
    # 2) Print the record in a readable layout
    if cmd == "/decision":
        result = service.analyze_decision(arg)
        for title, items in (("Pros", result.pros), ("Cons", result.cons),
                             ("Risks", result.risks), ("Benefits", result.benefits)):
            _print_list(title, items)
        print(f"Recommendation: {result.recommendation} (confidence {result.confidence}%)")

    elif cmd == "/document":
        doc = service.analyze_document(Path(arg).read_text(encoding="utf-8"))
        print(f"Summary: {doc.summary}")
        print(f"Words: {doc.word_count}  Reading time: {doc.reading_time}  Sentiment: {doc.sentiment}")
        _print_list("Key points", doc.key_points)
        _print_list("Action items", doc.action_items)

    elif cmd == "/report":
        path = Path(arg)
        report = service.analyze_report(path.read_bytes(), path.name)
        print(f"Overview: {report.overview}")
        for h in report.highlights:
            print(f"  {h.title}: {h.value} ({h.change or 'n/a'}, {h.trend})")
        _print_list("Insights", report.insights)
        _print_list("Recommendations", report.recommendations)
        _print_list("Risks", report.risks)

    elif cmd == "/learn":
        plan = service.generate_learning_plan(arg)
        print(f"{plan.skill} [{plan.level}] ~ {plan.estimated_time}")
        for step in plan.roadmap:
            print(f"  {step.id}. {step.title} ({step.duration}): {step.description}")
        _print_list("Tips", plan.tips)

    else:
        print(f"Unknown command: {cmd}")
        print(HELP)


def main() -> None:
    print("AI Dashboard CLI")
    print(HELP)
    print("-" * 50)

    service = FeatureService()
    chat = ChatSession()

    while True:
        try:
            user_message = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_message:
            continue

        cmd, _, arg = user_message.partition(" ")
        cmd = cmd.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd == "/new":
            chat.clear()
            print("Chat cleared.")
            continue

        if cmd == "/history":
            for m in chat.messages:
                print(f"[{m.created_at:%H:%M:%S}] {m.role}: {m.content}")
            continue

        try:
            if cmd.startswith("/"):
                if not arg.strip():
                    print(f"Usage: {cmd} <argument>")
                    continue
                _run_command(service, cmd, arg.strip())
                continue

            reply = chat.send(user_message, service.assistant_reply)
            if reply is not None:
                print(f"\nAssistant: {reply.content}")
        except WebhookError as e:
            # Only reachable with WEBHOOK_FALLBACK_ENABLED=0.
            print(f"Webhook failed: {e}")
        except OSError as e:
            print(f"Could not read file: {e}")


if __name__ == "__main__":
    main()
