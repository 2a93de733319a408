"""FastAPI dependencies resolving the caller from an ``Authorization: Bearer`` token."""
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from quizmaker.db.session import get_db
from quizmaker.schemas.user import UserSchema
from quizmaker.services.auth import get_current_user

bearer = HTTPBearer(auto_error=False)


def get_session_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer)],
) -> str | None:
    return credentials.credentials if credentials else None


def get_current_user_optional(
    db: Annotated[Session, Depends(get_db)],
    token: Annotated[str | None, Depends(get_session_token)],
) -> UserSchema | None:
    """Return current user if the bearer token is valid; else None."""
    if not token:
        return None
    return get_current_user(db, token)


def require_current_user(
    current_user: Annotated[UserSchema | None, Depends(get_current_user_optional)],
) -> UserSchema:
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user
