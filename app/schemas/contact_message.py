"""
Contact message API schemas.
"""

import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.base import APIModel


class ContactMessageCreate(APIModel):
    """Schema for a contact-form submission (attachment handled separately)."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    message: str = Field(..., min_length=1)


class ContactMessageResponse(APIModel):
    """Schema for a message in the admin inbox."""

    id: int
    name: str
    email: str
    message: str
    attachment_url: Optional[str]
    attachment_name: Optional[str]
    read: bool
    created_at: datetime.datetime


class ContactSubmitResponse(APIModel):
    message: str
    id: int
