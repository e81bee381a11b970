"""
Authentication service.

Local email/password strategy backed by server-side sessions with a
fixed TTL, plus the default-admin bootstrap run at startup.

Session states::

    absent --login--> active --logout / TTL expiry--> absent
"""

import datetime
import secrets
from typing import Optional

from sqlmodel import Session

from app.core.config import Settings
from app.core.errors import InvalidCredentials
from app.core.log import logger
from app.core.security import create_session_token, decode_session_token, get_password_hash, verify_password
from app.db.repositories.user import UserRepository, UserSessionRepository
from app.models.user import User, UserSession

ADMIN_USER_ID = "admin"


class AuthService:
    """Service for login, logout and session resolution."""

    def __init__(self, session: Session, settings: Settings):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
            settings: Application settings (TTL, signing key, admin credentials)
        """
        self.settings = settings
        self.users = UserRepository(session)
        self.sessions = UserSessionRepository(session)

    def ensure_default_admin(self) -> Optional[User]:
        """
        Create the default admin account if no user has the configured email.

        Returns:
            The created user, or None if it already existed
        """
        if self.users.exists_by_email(self.settings.ADMIN_EMAIL):
            return None

        admin = User(id=ADMIN_USER_ID, email=self.settings.ADMIN_EMAIL,
                     hashed_password=get_password_hash(self.settings.ADMIN_PASSWORD), first_name="Admin",
                     last_name="User", )
        admin = self.users.upsert(admin)
        logger.info("Default admin user created with email: %s", admin.email)
        return admin

    def login(self, email: str, password: str) -> tuple[User, UserSession]:
        """
        Verify credentials and open a session.

        Args:
            email: User email
            password: Plain-text password

        Returns:
            Tuple of (user, session)

        Raises:
            InvalidCredentials: Unknown email or wrong password
        """
        user = self.users.get_by_email(email)
        if not user or not verify_password(password, user.hashed_password):
            logger.warning("Failed login attempt for %s", email)
            raise InvalidCredentials()

        now = datetime.datetime.utcnow()
        self.sessions.delete_expired(now)
        user_session = UserSession(id=secrets.token_urlsafe(32), user_id=user.id, created_at=now,
                                   expires_at=now + datetime.timedelta(days=self.settings.SESSION_TTL_DAYS), )
        user_session = self.sessions.create(user_session)
        logger.info("User %s logged in", user.email)
        return user, user_session

    def logout(self, session_id: Optional[str]) -> None:
        """Invalidate a session.  Unknown or missing ids are ignored."""
        if session_id and self.sessions.delete(session_id):
            logger.info("Session closed")

    def resolve_session(self, session_id: Optional[str]) -> Optional[User]:
        """
        Return the user behind an active session.

        Expired sessions are deleted when encountered.
        """
        if not session_id:
            return None
        user_session = self.sessions.get_active(session_id, datetime.datetime.utcnow())
        if user_session is None:
            self.sessions.delete(session_id)
            return None
        return self.users.get_by_id(user_session.user_id)

    # ------------------------------------------------------------------
    # Cookie values
    # ------------------------------------------------------------------

    def issue_token(self, user_session: UserSession) -> str:
        return create_session_token(user_session.id, user_session.expires_at, self.settings.SECRET_KEY,
                                    self.settings.ALGORITHM)

    def read_token(self, token: Optional[str]) -> Optional[str]:
        """Return the session id in a cookie value, or None if it does not verify."""
        return decode_session_token(token, self.settings.SECRET_KEY, self.settings.ALGORITHM)
