"""
Identity repositories.

Users are keyed by an opaque string id; login sessions live in their
own table and are looked up together with their expiry.
"""

import datetime
from typing import Optional

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.models.user import User, UserSession

PROFILE_FIELDS = ("email", "hashed_password", "first_name", "last_name", "profile_image_url")


class UserRepository(BaseRepository[User]):
    """Accounts allowed to open admin sessions."""

    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def upsert(self, user: User) -> User:
        """
        Store ``user`` under its id.

        An existing row with that id has its profile fields overwritten
        and ``updated_at`` refreshed; otherwise the user is inserted.
        """
        existing = self.get_by_id(user.id)
        if existing is None:
            return self.create(user)

        for field in PROFILE_FIELDS:
            setattr(existing, field, getattr(user, field))
        existing.updated_at = datetime.datetime.utcnow()
        return self.update(existing)


class UserSessionRepository(BaseRepository[UserSession]):
    """Server-side login sessions."""

    model = UserSession

    def get_active(self, session_id: str, now: datetime.datetime) -> Optional[UserSession]:
        """Return the session if it exists and has not expired."""
        statement = select(UserSession).where(UserSession.id == session_id, UserSession.expires_at > now)
        return self.session.exec(statement).first()

    def delete_expired(self, now: datetime.datetime) -> int:
        """Remove every expired session; returns how many were removed."""
        expired = list(self.session.exec(select(UserSession).where(UserSession.expires_at <= now)).all())
        for user_session in expired:
            self.session.delete(user_session)
        if expired:
            self.session.commit()
        return len(expired)
