"""Sentence-like splitting for per-segment evaluation."""

from __future__ import annotations

import re
from typing import Iterator

# Break after . ! ? followed by whitespace (punctuation kept), or at newline runs
_BOUNDARY = re.compile(r"(?<=[.!?])\s+|[\n\r]+")


def segment(text: str) -> Iterator[str]:
    """Yield trimmed, non-empty segments of text in order.

    Both ``\\n`` and ``\\r`` count as line breaks, so CRLF and CR-only
    (old Mac) input split the same way as LF input.
    """
    for part in _BOUNDARY.split(text):
        trimmed = part.strip()
        if trimmed:
            yield trimmed
