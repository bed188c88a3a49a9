from __future__ import annotations

import os
import tempfile

# Keep test logs out of the checkout; must run before remover.core.paths is imported
os.environ.setdefault("REMOVER_DATA_DIR", tempfile.mkdtemp(prefix="remover-tests-"))
