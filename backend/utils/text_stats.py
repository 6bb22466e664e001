# Role: Small deterministic text helpers shared by the document mock and the UI
# (word counting and a short preview used in simulated replies).

from __future__ import annotations


def count_words(text: str) -> int:
    # Key line: floor of 1, so an empty document still reads as "1 min" rather than zero.
    return max(len((text or "").split()), 1)


def preview(text: str, limit: int) -> str:
    # Key line: plain prefix cut, no word-boundary smarts; simulated replies must be deterministic.
    return (text or "")[:limit]
