"""Comparison keys for text fragments (whitespace, case, trailing punctuation)."""

from __future__ import annotations

import re

_LINE_BREAKS = re.compile(r"[\n\r]+")
_WHITESPACE = re.compile(r"\s+")
_TRAILING_PUNCTUATION = re.compile(r"[.,!?;:]+$")


def normalize(text: str) -> str:
    """Build the canonical comparison key for a fragment.

    Line breaks become spaces, whitespace runs collapse to one space, the
    result is trimmed, a trailing run of ``. , ! ? ; :`` is dropped, and
    everything is lowercased.

    Args:
        text: Any fragment (segment or banned passage)

    Returns:
        Normalized key ("" for empty or whitespace-only input)
    """
    key = _LINE_BREAKS.sub(" ", text)
    key = _WHITESPACE.sub(" ", key).strip()
    key = _TRAILING_PUNCTUATION.sub("", key)
    return key.lower()
