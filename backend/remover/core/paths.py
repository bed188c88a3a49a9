from __future__ import annotations

import os
from pathlib import Path

# Project root is 3 levels up from this file (backend/remover/core/paths.py -> root)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Data directory (logs, optional passages file); overridable for tests and deployments
DATA_DIR = Path(os.environ.get("REMOVER_DATA_DIR", PROJECT_ROOT / "data"))


def get_data_path(filename: str = "") -> Path:
    """Get path to file in the data directory.

    Args:
        filename: Optional filename to append to data directory path

    Returns:
        Path object pointing to the data directory or data/filename
    """
    if filename:
        return DATA_DIR / filename
    return DATA_DIR
