# api/routes/auth.py

import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.deps import get_current_user, get_session_manager, get_settings, get_user_repository
from api.schemas.user import AuthResponse, Credentials, MessageResponse, User
from core.config import Settings
from core.exceptions import ConflictError, ValidationError
from core.sa.models import User as UserModel
from core.sa.repositories.user import UserRepository
from core.security import SessionManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def set_session_cookie(response: Response, token: str, settings: Settings, sessions: SessionManager) -> None:
    """Attach the session token as an http-only cookie."""
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=sessions.max_age,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    credentials: Credentials,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
    sessions: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings)
):
    """Create an account and start a session for it."""
    try:
        user = users.create_user(credentials.email, credentials.password)
    except (ConflictError, ValidationError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    set_session_cookie(response, sessions.issue(user.id), settings, sessions)
    return AuthResponse(message="User created successfully", user=User.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: Credentials,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
    sessions: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings)
):
    user = users.get_by_email(credentials.email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    if not users.verify_password(user, credentials.password):
        logger.info("Failed login for user %s", user.id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")

    set_session_cookie(response, sessions.issue(user.id), settings, sessions)
    return AuthResponse(message="Login successful", user=User.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response, settings: Settings = Depends(get_settings)):
    """Clear the session cookie.
    
    The token itself stays valid until it expires.
    """
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=AuthResponse)
def me(current_user: UserModel = Depends(get_current_user)):
    return AuthResponse(user=User.model_validate(current_user))
