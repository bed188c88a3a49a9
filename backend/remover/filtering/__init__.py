"""Banned-passage filtering package.

Exports:
    SentenceRemover: Filter bound to a fixed passage set
    filter_text: One-shot filter over a passage sequence
"""

from .eraser import erase
from .models import BannedPassage, FilterReport
from .normalize import normalize
from .pipeline import SentenceRemover, filter_text
from .segmenter import segment
from .sentence_filter import filter_segments

__all__ = [
    "BannedPassage",
    "FilterReport",
    "SentenceRemover",
    "erase",
    "filter_segments",
    "filter_text",
    "normalize",
    "segment",
]
