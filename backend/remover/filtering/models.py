"""Pydantic models for banned passages and filter results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BannedPassage(BaseModel):
    """A known block of text to remove, identified by a stable id."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable passage identifier")
    text: str = Field(..., description="Passage text (one or more sentences)")


class FilterReport(BaseModel):
    """Filtered text plus what was removed."""

    text: str = Field(..., description="Filtered text")
    erased_passages: list[str] = Field(default_factory=list, description="Ids of passages erased verbatim")
    segments_kept: int = Field(default=0, ge=0, description="Segments retained in the output")
    segments_removed: int = Field(default=0, ge=0, description="Segments discarded as banned")
    len_before: int = Field(default=0, ge=0, description="Input length in characters")
    len_after: int = Field(default=0, ge=0, description="Output length in characters")
    text_hash: str = Field(default="", description="SHA256 prefix of the output (for logging)")
