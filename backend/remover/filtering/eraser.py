"""Whitespace-tolerant, case-insensitive removal of banned passages."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from remover.core.logging import log

# Failures the re module can raise for pathological passages
PATTERN_ERRORS = (re.error, OverflowError, RecursionError)


def build_matcher(passage: str) -> re.Pattern[str] | None:
    """Compile a tolerant matcher for one passage.

    Each whitespace-delimited word must appear literally, separated by one or
    more whitespace characters of any kind (newlines included).

    Args:
        passage: Banned passage text

    Returns:
        Compiled case-insensitive pattern, or None if the passage has no words

    Raises:
        re.error, OverflowError, RecursionError: If the pattern cannot be compiled
    """
    words = passage.split()
    if not words:
        return None
    pattern = r"\s+".join(re.escape(word) for word in words)
    return re.compile(pattern, re.IGNORECASE)


def compile_matchers(passages: Iterable[str]) -> list[re.Pattern[str] | None]:
    """Compile matchers for a passage set, in order.

    A passage whose matcher cannot be built gets None and is skipped by
    ``erase_with``; the failure is logged, never raised.
    """
    matchers: list[re.Pattern[str] | None] = []
    for index, passage in enumerate(passages):
        try:
            matchers.append(build_matcher(passage))
        except PATTERN_ERRORS as e:
            log.warning(f"ERASE_PATTERN_FAILED index={index} stage=compile error={e!r}")
            matchers.append(None)
    return matchers


def erase_with(text: str, matchers: Sequence[re.Pattern[str] | None]) -> tuple[str, list[int]]:
    """Apply precompiled matchers sequentially.

    Each matcher runs on the output of the previous one.

    Args:
        text: Raw input text
        matchers: Output of ``compile_matchers``

    Returns:
        Tuple of (erased_text, indexes_of_passages_that_matched)
    """
    matched: list[int] = []
    for index, matcher in enumerate(matchers):
        if matcher is None:
            continue
        try:
            erased, count = matcher.subn("", text)
        except PATTERN_ERRORS as e:
            log.warning(f"ERASE_PATTERN_FAILED index={index} stage=match error={e!r}")
            continue
        if count:
            matched.append(index)
            text = erased
    return text, matched


def erase(text: str, passages: Sequence[str]) -> str:
    """Remove every tolerant occurrence of each passage from text.

    Best-effort: a passage whose matcher fails is skipped and the text is
    left as it was for that passage.

    Args:
        text: Raw input text
        passages: Banned passages in application order

    Returns:
        Text with all matches replaced by ""
    """
    erased, _ = erase_with(text, compile_matchers(passages))
    return erased
