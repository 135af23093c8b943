"""Local configuration for pasteit."""

from __future__ import annotations

import os


DEFAULT_MAX_CONTENT_SIZE = 1_000_000
DEFAULT_MAX_CLEAN_SIZE = 500_000
DEFAULT_LOG_LEVEL = "WARNING"

# Clipboard HTML above this size is refused before conversion.
PASTEIT_MAX_CONTENT_SIZE = int(os.getenv("PASTEIT_MAX_CONTENT_SIZE", str(DEFAULT_MAX_CONTENT_SIZE)))
# Markdown above this size skips cosmetic cleanup.
PASTEIT_MAX_CLEAN_SIZE = int(os.getenv("PASTEIT_MAX_CLEAN_SIZE", str(DEFAULT_MAX_CLEAN_SIZE)))
PASTEIT_LOG_LEVEL = os.getenv("PASTEIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
