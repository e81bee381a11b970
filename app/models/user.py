"""
User database model.

Defines the User table for authentication and the server-side
session table linking a signed cookie to a user.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """
    User model for authentication.

    ``id`` is an opaque string.  The bootstrap admin account uses the
    fixed id ``"admin"``.
    """
    __tablename__ = "users"

    id: str = Field(primary_key=True, max_length=64)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    # Absent for externally-authenticated users
    hashed_password: Optional[str] = Field(default=None)

    # Profile
    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    profile_image_url: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class UserSession(SQLModel, table=True):
    """Server-side login session with a fixed expiry."""
    __tablename__ = "user_sessions"

    id: str = Field(primary_key=True, max_length=64)
    user_id: str = Field(foreign_key="users.id", nullable=False, index=True)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    expires_at: datetime = Field(nullable=False, index=True)
