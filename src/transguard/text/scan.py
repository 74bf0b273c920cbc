"""Bounded character searches over text spans.

A span is a string plus an explicit length. Searches never look past that
length, even when the underlying string is longer.
"""

from typing import Optional


def span_of(text: Optional[str], length: Optional[int] = None) -> str:
    """Return the part of ``text`` covered by ``length`` characters.

    ``None`` is treated as an empty span, a missing length means the whole
    string, and a length past the end of the string is clamped.
    """
    if not text:
        return ""
    if length is None or length >= len(text):
        return text
    if length <= 0:
        return ""
    return text[:length]


def find_char(text: str, ch: str, start: int = 0, end: Optional[int] = None) -> int:
    """Index of the first ``ch`` in ``text[start:end]``, or -1."""
    if end is None or end > len(text):
        end = len(text)
    if start >= end:
        return -1
    return text.find(ch, start, end)


def rfind_char(text: str, ch: str, end: int) -> int:
    """Index of the last ``ch`` before position ``end``, or -1."""
    if end <= 0:
        return -1
    return text.rfind(ch, 0, min(end, len(text)))


def starts_with_nocase(text: str, prefix: str, start: int = 0) -> bool:
    """Case-insensitive compare of ``prefix`` against ``text`` at ``start``."""
    candidate = text[start:start + len(prefix)]
    return len(candidate) == len(prefix) and candidate.lower() == prefix.lower()


def contains_space(text: str) -> bool:
    return any(ch.isspace() for ch in text)
