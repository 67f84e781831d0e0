from __future__ import annotations

import os

LOG_LEVEL = os.getenv("BULK_RENAME_LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("BULK_RENAME_LOG_DIR", "")
