"""
Security helpers.

Password hashing (passlib) and signing of session cookie values
(python-jose).  The cookie only carries the session id; the session
itself lives server-side in the ``user_sessions`` table.
"""

import datetime
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings

# pbkdf2_sha256 is salted and needs no native bcrypt backend
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """Hash a plain-text password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Check a plain-text password against a stored hash.

    Users without a stored hash (externally authenticated) never match.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Unrecognised hash format
        return False


def create_session_token(session_id: str, expires_at: datetime.datetime, secret_key: Optional[str] = None,
                         algorithm: Optional[str] = None) -> str:
    """
    Sign a session id for use as a cookie value.

    Args:
        session_id: Server-side session id
        expires_at: Naive UTC expiry of the session
        secret_key: Signing key (defaults to ``settings.SECRET_KEY``)
        algorithm: JWT algorithm (defaults to ``settings.ALGORITHM``)

    Returns:
        Encoded token
    """
    claims = {"sid": session_id, "exp": expires_at.replace(tzinfo=datetime.timezone.utc)}
    return jwt.encode(claims, secret_key or settings.SECRET_KEY, algorithm=algorithm or settings.ALGORITHM)


def decode_session_token(token: Optional[str], secret_key: Optional[str] = None,
                         algorithm: Optional[str] = None) -> Optional[str]:
    """
    Verify a cookie value and extract the session id.

    Returns:
        The session id, or None if the token is missing, tampered or expired
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, secret_key or settings.SECRET_KEY,
                             algorithms=[algorithm or settings.ALGORITHM])
    except JWTError:
        return None
    session_id = payload.get("sid")
    return session_id if isinstance(session_id, str) else None
