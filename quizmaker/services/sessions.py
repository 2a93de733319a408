"""Session storage: issue, validate, revoke and reap opaque bearer tokens.

A row whose ``expires_at`` is not strictly in the future is treated exactly
like a missing row, whether or not cleanup has removed it yet.
"""
import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from quizmaker.core.config import get_settings
from quizmaker.core.security import generate_session_token
from quizmaker.db.client import mutate, new_id, query_first, utc_now
from quizmaker.schemas.user import UserSessionSchema

logger = logging.getLogger(__name__)


def create_session(db: Session, user_id: str, ttl_days: int | None = None) -> str:
    """Insert a session for ``user_id`` and return its token."""
    if ttl_days is None:
        ttl_days = get_settings().session_ttl_days
    token = generate_session_token()
    now = utc_now()
    mutate(
        db,
        "INSERT INTO user_sessions (id, user_id, session_token, expires_at, created_at) VALUES (?, ?, ?, ?, ?)",
        [new_id(), user_id, token, now + timedelta(days=ttl_days), now],
    )
    return token


def validate_session_token(db: Session, token: str, now: datetime | None = None) -> UserSessionSchema | None:
    row = query_first(
        db,
        "SELECT id, user_id, session_token, expires_at, created_at FROM user_sessions "
        "WHERE session_token = ? AND expires_at > ?",
        [token, now or utc_now()],
    )
    return UserSessionSchema.model_validate(row) if row else None


def delete_session(db: Session, token: str) -> int:
    return mutate(db, "DELETE FROM user_sessions WHERE session_token = ?", [token])


def cleanup_expired_sessions(db: Session, now: datetime | None = None) -> int:
    """Delete every session expiring at or before ``now``; return how many were removed."""
    removed = mutate(db, "DELETE FROM user_sessions WHERE expires_at <= ?", [now or utc_now()])
    logger.info("Expired sessions removed", extra={"count": removed})
    return removed
