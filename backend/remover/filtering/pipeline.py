"""Erase-then-segment pipeline over a fixed set of banned passages."""

from __future__ import annotations

import hashlib
from typing import Sequence, Union

from remover.filtering.eraser import compile_matchers, erase_with
from remover.filtering.models import BannedPassage, FilterReport
from remover.filtering.segmenter import segment
from remover.filtering.sentence_filter import joiner_for, partition_segments, passage_keys

PassageLike = Union[BannedPassage, str]


def _as_passages(passages: Sequence[PassageLike]) -> tuple[BannedPassage, ...]:
    """Coerce plain strings to passages with positional ids."""
    return tuple(
        p if isinstance(p, BannedPassage) else BannedPassage(id=f"passage_{i}", text=p)
        for i, p in enumerate(passages)
    )


class SentenceRemover:
    """Removes banned passages from text.

    Matchers and comparison keys are built once at construction; the passage
    set is read-only afterwards, so one instance can serve concurrent callers.

    Example:
        >>> remover = SentenceRemover(["Remove banned sentence here."])
        >>> remover.filter("Keep this. Remove banned sentence here. Keep that.")
        'Keep this. Keep that.'
    """

    def __init__(self, passages: Sequence[PassageLike]):
        self.passages = _as_passages(passages)
        texts = [p.text for p in self.passages]
        self._matchers = compile_matchers(texts)
        self._keys = passage_keys(texts)

    def filter(self, text: str) -> str:
        """Return text with banned passages and matching segments removed."""
        if not text:
            return ""
        result, _, _, _ = self._run(text)
        return result

    def filter_with_report(self, text: str) -> FilterReport:
        """Filter text and report what was removed.

        Args:
            text: Source text (may be empty)

        Returns:
            FilterReport with the filtered text, erased passage ids,
            kept/removed segment counts, lengths and output hash
        """
        if not text:
            return _report("", len_before=0)

        result, matched, kept, removed = self._run(text)
        return _report(
            result,
            len_before=len(text),
            erased_passages=[self.passages[i].id for i in matched],
            segments_kept=kept,
            segments_removed=removed,
        )

    def _run(self, text: str) -> tuple[str, list[int], int, int]:
        erased, matched = erase_with(text, self._matchers)
        kept, removed = partition_segments(segment(erased), self._keys)
        return joiner_for(text).join(kept), matched, len(kept), removed


def _report(text: str, *, len_before: int, **counts) -> FilterReport:
    # Lone surrogates are legal in str but rejected by strict UTF-8
    digest = hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()
    return FilterReport(
        text=text,
        len_before=len_before,
        len_after=len(text),
        text_hash=digest[:16],
        **counts,
    )


def filter_text(text: str, passages: Sequence[PassageLike]) -> str:
    """Remove banned passages from text.

    Erases tolerant verbatim occurrences first, then drops any sentence or
    line whose normalized form contains, or is contained in, a normalized
    passage. Never raises for string input.

    Args:
        text: Source text
        passages: Banned passages, in erasure order

    Returns:
        Filtered text, joined by blank lines if the input had line breaks
        and by single spaces otherwise
    """
    return SentenceRemover(passages).filter(text)
