"""
Authentication endpoints.

Login opens a server-side session and sets the signed session cookie;
logout closes it.  Both are safe to repeat.
"""

from fastapi import APIRouter, Depends, Response

from app.api.dependencies import get_auth_service, get_current_user, get_session_id
from app.models.user import User
from app.schemas.user import LoginResponse, MessageResponse, UserLogin, UserResponse
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("/login",
             summary="Log in with email and password.",
             response_model=LoginResponse)
def login(login_data: UserLogin, response: Response, auth: AuthService = Depends(get_auth_service)):
    """
    Authenticate via JSON body.

    Args:
        login_data: User login credentials (email, password)
        response: Outgoing response, receives the session cookie
        auth: Authentication service

    Returns:
        Confirmation message and the logged-in user

    Raises:
        InvalidCredentials (401): Unknown email or wrong password; no cookie is set
    """
    user, user_session = auth.login(login_data.email, login_data.password)
    settings = auth.settings
    response.set_cookie(key=settings.SESSION_COOKIE_NAME, value=auth.issue_token(user_session),
                        max_age=settings.SESSION_TTL_DAYS * 24 * 60 * 60, httponly=True,
                        secure=settings.SESSION_COOKIE_SECURE, samesite="lax", )
    return LoginResponse(message="Login successful", user=UserResponse.model_validate(user))


@router.post("/logout",
             summary="Close the current session.",
             response_model=MessageResponse)
def logout(response: Response, session_id: str | None = Depends(get_session_id),
           auth: AuthService = Depends(get_auth_service)):
    auth.logout(session_id)
    response.delete_cookie(auth.settings.SESSION_COOKIE_NAME, httponly=True, samesite="lax")
    return MessageResponse(message="Logged out successfully")


@router.get("/auth/user",
            summary="Current user info.",
            response_model=UserResponse)
def current_user(user: User = Depends(get_current_user)):
    return user
