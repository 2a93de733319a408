"""User directory: creation and case-insensitive lookups."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from quizmaker.core.exceptions import ConsistencyError, DuplicateEmailError, DuplicateUsernameError
from quizmaker.core.security import hash_password
from quizmaker.db.client import mutate, new_id, query_first, utc_now
from quizmaker.schemas.user import UserCreateSchema, UserSchema

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, first_name, last_name, username, email, password_hash, created_at, updated_at"


def _to_user(row: dict | None) -> UserSchema | None:
    # password_hash is dropped here: UserSchema ignores unknown keys.
    return UserSchema.model_validate(row) if row else None


def create_user(db: Session, data: UserCreateSchema) -> UserSchema:
    """Insert a new user with a hashed password; return the stored record."""
    if username_exists(db, data.username):
        raise DuplicateUsernameError()
    if email_exists(db, data.email):
        raise DuplicateEmailError()

    user_id = new_id()
    now = utc_now()
    try:
        mutate(
            db,
            f"INSERT INTO users ({USER_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            [
                user_id,
                data.first_name,
                data.last_name,
                data.username,
                data.email,
                hash_password(data.password),
                now,
                now,
            ],
        )
    except IntegrityError:
        # A concurrent registration took the name between the check and the insert.
        if username_exists(db, data.username):
            raise DuplicateUsernameError() from None
        if email_exists(db, data.email):
            raise DuplicateEmailError() from None
        raise

    user = get_user_by_id(db, user_id)
    if user is None:
        raise ConsistencyError("Failed to retrieve created user")
    logger.info("User registered", extra={"user_id": user_id})
    return user


def get_user_by_id(db: Session, user_id: str) -> UserSchema | None:
    return _to_user(query_first(db, f"SELECT {USER_COLUMNS} FROM users WHERE id = ?", [user_id]))


def get_user_by_username(db: Session, username: str) -> UserSchema | None:
    return _to_user(
        query_first(db, f"SELECT {USER_COLUMNS} FROM users WHERE LOWER(username) = LOWER(?)", [username])
    )


def get_user_by_email(db: Session, email: str) -> UserSchema | None:
    return _to_user(
        query_first(db, f"SELECT {USER_COLUMNS} FROM users WHERE LOWER(email) = LOWER(?)", [email])
    )


def get_user_row_by_username_or_email(db: Session, identifier: str) -> dict | None:
    """Raw row including password_hash; only the credential check should use this."""
    return query_first(
        db,
        f"SELECT {USER_COLUMNS} FROM users WHERE LOWER(username) = LOWER(?) OR LOWER(email) = LOWER(?)",
        [identifier, identifier],
    )


def get_user_by_username_or_email(db: Session, identifier: str) -> UserSchema | None:
    return _to_user(get_user_row_by_username_or_email(db, identifier))


def username_exists(db: Session, username: str) -> bool:
    return get_user_by_username(db, username) is not None


def email_exists(db: Session, email: str) -> bool:
    return get_user_by_email(db, email) is not None
