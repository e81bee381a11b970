"""
Shared API dependencies.

Reusable FastAPI dependencies for settings, uploads and session
authentication.  Everything is read from ``request.app.state`` which
the application factory populates.
"""

from fastapi import Depends, Request
from sqlmodel import Session

from app.core.config import Settings
from app.core.errors import Unauthorized
from app.db.session import get_db
from app.models.user import User
from app.services.auth_service import AuthService
from app.services.upload_service import UploadHandler


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_uploads(request: Request) -> UploadHandler:
    return request.app.state.uploads


def get_auth_service(db: Session = Depends(get_db), settings: Settings = Depends(get_settings)) -> AuthService:
    return AuthService(db, settings)


def get_session_id(request: Request, auth: AuthService = Depends(get_auth_service)) -> str | None:
    """Verified session id from the session cookie, if any."""
    token = request.cookies.get(auth.settings.SESSION_COOKIE_NAME)
    return auth.read_token(token)


def get_current_user(session_id: str | None = Depends(get_session_id),
                     auth: AuthService = Depends(get_auth_service), ) -> User:
    """Gate for admin routes: the user behind a valid, unexpired session."""
    user = auth.resolve_session(session_id)
    if not user:
        raise Unauthorized()
    return user
