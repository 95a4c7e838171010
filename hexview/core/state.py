from __future__ import annotations

from hexview.core.settings import Settings

SETTINGS = Settings()
