"""
User API schemas.

Pydantic models for login and user-related responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.base import APIModel


# Request schemas
class UserLogin(APIModel):
    """Schema for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


# Response schemas
class UserResponse(APIModel):
    """Schema for user data in API responses (no sensitive data)."""
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class LoginResponse(APIModel):
    message: str
    user: UserResponse


class MessageResponse(APIModel):
    """Plain acknowledgement body."""
    message: str
