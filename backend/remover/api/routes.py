"""Sentence Remover API routes (filtering + observability)."""

from __future__ import annotations

import json
import os

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from remover.core.config import settings
from remover.core.logging import log, truncate_log_file
from remover.core.passages import get_remover
from remover.core.paths import get_data_path
from remover.filtering import FilterReport

router = APIRouter()

# Rate limiter instance
limiter = Limiter(key_func=get_remote_address)


# ============================================================================
# Filtering
# ============================================================================


class FilterRequest(BaseModel):
    """Request body for filtering text."""

    text: str  # Source text as pasted by the user (may be empty)


@router.post("/filter")
@limiter.limit(settings.filter_rate_limit)
async def filter_text_endpoint(request: Request) -> dict:
    """Remove banned passages from the submitted text.

    Args:
        request: FastAPI request object (for rate limiting)

    Returns:
        FilterReport as dict:
        {
            "text": "Keep this.\\n\\nKeep that too.",
            "erased_passages": ["coursera_integrity"],
            "segments_kept": 2,
            "segments_removed": 0,
            "len_before": 812,
            "len_after": 27,
            "text_hash": "..."
        }

    Raises:
        HTTPException: 400 if body invalid, 413 if text exceeds max_input_chars
    """
    # Parse body manually (slowapi needs the raw Request as the endpoint argument)
    try:
        body_bytes = await request.body()
        body = FilterRequest(**json.loads(body_bytes))
    except (ValueError, TypeError, ValidationError) as e:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid request body: {str(e)}"
        )

    if len(body.text) > settings.max_input_chars:
        log.warning(
            f"FILTER_INPUT_TOO_LARGE client={get_remote_address(request)} "
            f"chars={len(body.text)} max={settings.max_input_chars}"
        )
        raise HTTPException(
            status_code=413,
            detail=f"Text too large (max {settings.max_input_chars} characters)"
        )

    # JSON escapes can carry lone surrogates; responses are encoded as strict UTF-8
    text = body.text.encode("utf-8", "replace").decode("utf-8")
    if text != body.text:
        log.warning(f"FILTER_INPUT_UNENCODABLE client={get_remote_address(request)} replaced=true")

    report: FilterReport = get_remover().filter_with_report(text)

    log.info(
        f"FILTER_DONE len_before={report.len_before} len_after={report.len_after} "
        f"erased={','.join(report.erased_passages) or '-'} "
        f"kept={report.segments_kept} removed={report.segments_removed} hash={report.text_hash}"
    )
    return report.model_dump()


@router.get("/passages")
def list_passages() -> dict:
    """List the configured banned passages.

    Returns:
        Dict with passages in erasure order
    """
    passages = get_remover().passages
    return {
        "ok": True,
        "passages": [p.model_dump() for p in passages],
    }


# ============================================================================
# Health & Observability
# ============================================================================


@router.get("/healthz")
def healthz() -> dict:
    """Health check endpoint with filter readiness status.

    Returns:
        Dict with status and configuration (no passage text)
    """
    passages_source = "default"
    if settings.passages_file:
        passages_source = "file" if os.path.exists(settings.passages_file) else "file_missing"

    return {
        "ok": True,
        "passages": {
            "source": passages_source,
            "count": len(get_remover().passages),
        },
        "limits": {
            "max_input_chars": settings.max_input_chars,
            "max_body_bytes": settings.max_body_bytes,
            "filter_rate_limit": settings.filter_rate_limit,
        },
    }


@router.get("/logs/tail")
@limiter.limit("60/minute")
def get_logs_tail(request: Request, lines: int = 100) -> dict:
    """Get last N lines from logs.txt for real-time log viewing.

    Args:
        request: FastAPI request object (for rate limiting)
        lines: Number of lines to return (default 100, max 10000)

    Returns:
        Dict with log lines array and metadata
    """
    # Truncate log file if needed (keeps last 10k lines)
    truncate_log_file()

    max_lines = max(1, min(lines, 10000))
    log_file = str(get_data_path("logs.txt"))

    if not os.path.exists(log_file):
        return {"ok": True, "logs": [], "message": "No logs yet"}

    try:
        with open(log_file, "r", encoding="utf-8", errors="replace") as f:
            all_lines = f.readlines()
            tail_lines = all_lines[-max_lines:]

        return {
            "ok": True,
            "logs": [line.rstrip('\n') for line in tail_lines],
            "total_lines": len(all_lines),
            "returned_lines": len(tail_lines)
        }
    except OSError as e:
        log.error(f"Failed to read logs: {e}")
        return {"ok": False, "error": str(e)}
