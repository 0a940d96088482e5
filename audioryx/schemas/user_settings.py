# ============================================================================
# FILE: audioryx/schemas/user_settings.py
# ============================================================================
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

SETTINGS_DOCUMENT_VERSION = 1

class SettingsDocument(BaseModel):
    """
    Per-user settings blob (theme, volume and similar client preferences).

    Any JSON object is accepted; an explicit `version` must be a known one.
    """
    model_config = ConfigDict(extra="allow")

    version: Optional[int] = Field(None, ge=1, le=SETTINGS_DOCUMENT_VERSION)
