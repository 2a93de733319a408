"""Login, registration, logout and current-user resolution."""
import logging

from sqlalchemy.orm import Session

from quizmaker.core.exceptions import InvalidCredentialsError
from quizmaker.core.security import dummy_verify_password, verify_password
from quizmaker.schemas.user import AuthResultSchema, UserCreateSchema, UserSchema
from quizmaker.services.sessions import create_session, delete_session, validate_session_token
from quizmaker.services.users import create_user, get_user_by_id, get_user_row_by_username_or_email

logger = logging.getLogger(__name__)

__all__ = [
    "get_current_user",
    "login",
    "logout",
    "register",
    "verify_session",
]


def login(db: Session, username_or_email: str, password: str) -> AuthResultSchema:
    """Check credentials and open a new session.

    Unknown user and wrong password raise the same error, and an unknown user
    still costs one hash verification.
    """
    row = get_user_row_by_username_or_email(db, username_or_email)
    if row is None:
        dummy_verify_password()
        logger.warning("Login failed")
        raise InvalidCredentialsError()
    if not verify_password(password, row["password_hash"]):
        logger.warning("Login failed")
        raise InvalidCredentialsError()

    user = UserSchema.model_validate(row)
    token = create_session(db, user.id)
    logger.info("User logged in", extra={"user_id": user.id})
    return AuthResultSchema(user=user, session_token=token)


def register(db: Session, data: UserCreateSchema) -> AuthResultSchema:
    """Create the account and log it in straight away."""
    user = create_user(db, data)
    token = create_session(db, user.id)
    return AuthResultSchema(user=user, session_token=token)


def logout(db: Session, session_token: str) -> None:
    # Unknown tokens delete nothing; that is not an error.
    if delete_session(db, session_token):
        logger.info("User logged out")


def get_current_user(db: Session, session_token: str) -> UserSchema | None:
    session = validate_session_token(db, session_token)
    if session is None:
        return None
    # Orphaned sessions resolve to None as well.
    return get_user_by_id(db, session.user_id)


def verify_session(db: Session, session_token: str) -> bool:
    return validate_session_token(db, session_token) is not None
