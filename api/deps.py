# api/deps.py
"""FastAPI dependencies resolving per-app state and the authenticated user."""

from typing import Iterator, Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from core.catalog import GoogleBooksClient
from core.config import Settings
from core.exceptions import UnauthenticatedError
from core.sa.models import User
from core.sa.repositories.user import UserRepository
from core.security import PasswordHasher, SessionManager


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Iterator[Session]:
    """Get a database session.
    
    The session is closed when the request is complete.
    
    Yields:
        Session: A SQLAlchemy session
    """
    session = request.app.state.database.get_session()
    try:
        yield session
    finally:
        session.close()


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_catalog_client(request: Request) -> GoogleBooksClient:
    return request.app.state.catalog_client


def get_user_repository(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher)
) -> UserRepository:
    return UserRepository(db, hasher)


def get_current_user(
    request: Request,
    settings: Settings = Depends(get_settings),
    sessions: SessionManager = Depends(get_session_manager),
    users: UserRepository = Depends(get_user_repository)
) -> User:
    """Resolve the session cookie to a registered user or fail with 401."""
    token: Optional[str] = request.cookies.get(settings.cookie_name)
    try:
        user_id = sessions.verify(token)
    except UnauthenticatedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)

    user = users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user
