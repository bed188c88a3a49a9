from __future__ import annotations

import json
import os
import threading
from typing import Any

LOCK = threading.Lock()


def _load(path: str) -> Any:
    """Loads JSON from file, returns empty list if file doesn't exist."""
    if not os.path.exists(path):
        return []
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def read_json(path: str) -> list[dict[str, Any]]:
    """Thread-safe read of JSON array file.

    Args:
        path: Path to JSON file

    Returns:
        List of dictionaries

    Raises:
        ValueError: If the file holds valid JSON that is not an array
    """
    with LOCK:
        data = _load(path)
    if not isinstance(data, list):
        raise ValueError(f"Expected JSON array in {path}, got {type(data).__name__}")
    return data


def atomic_write(path: str, content: str) -> None:
    """Atomically writes string content to file using temp + rename.

    Args:
        path: Path to file
        content: String content to write
    """
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(content)
    os.replace(tmp, path)
