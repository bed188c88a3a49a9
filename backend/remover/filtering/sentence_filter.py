"""Segment-level removal of banned passages and reassembly."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from remover.filtering.normalize import normalize
from remover.filtering.segmenter import segment

_NEWLINE = re.compile(r"[\n\r]")


def passage_keys(passages: Iterable[str]) -> list[str]:
    """Normalize passages for comparison.

    A passage with an empty key (e.g. "...") is contained in every segment
    key, so it discards every segment.
    """
    return [normalize(p) for p in passages]


def is_banned(segment_key: str, keys: Sequence[str]) -> bool:
    """Check bidirectional containment of a segment key against passage keys.

    Short segments that happen to occur inside a passage are discarded too;
    that over-removal is accepted behavior.
    """
    for key in keys:
        if segment_key and segment_key in key:
            return True
        if key in segment_key:
            return True
    return False


def partition_segments(segments: Iterable[str], keys: Sequence[str]) -> tuple[list[str], int]:
    """Split segments into kept ones and a discarded count.

    Returns:
        Tuple of (kept_segments, discarded_count)
    """
    kept: list[str] = []
    discarded = 0
    for part in segments:
        if is_banned(normalize(part), keys):
            discarded += 1
        else:
            kept.append(part)
    return kept, discarded


def joiner_for(original: str) -> str:
    """Separator for reassembly: blank line if the input had line breaks, else a space."""
    return "\n\n" if _NEWLINE.search(original) else " "


def filter_segments(text: str, passages: Sequence[str], *, original: str | None = None) -> str:
    """Drop segments of text that match a banned passage and rejoin the rest.

    Args:
        text: Text to segment (normally already passed through the eraser)
        passages: Banned passages
        original: Input before erasure; decides the separator. Defaults to text.

    Returns:
        Rejoined kept segments ("" when nothing is kept)
    """
    if not text:
        return ""
    kept, _ = partition_segments(segment(text), passage_keys(passages))
    return joiner_for(text if original is None else original).join(kept)
