"""
Admin setting API schemas.
"""

import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import APIModel


class AdminSettingUpdate(APIModel):
    """Schema for setting one key. ``value`` must be present but may be null."""

    key: str = Field(..., min_length=1, max_length=100)
    value: Optional[str] = Field(...)


class AdminSettingResponse(APIModel):
    key: str
    value: Optional[str]
    updated_at: datetime.datetime
