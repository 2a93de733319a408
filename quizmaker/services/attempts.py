"""Attempt recording: a user's answer to an MCQ and whether it was right."""
import logging

from sqlalchemy.orm import Session

from quizmaker.core.exceptions import ChoiceMismatchError, ChoiceNotFoundError, ConsistencyError
from quizmaker.db.client import mutate, new_id, query, query_first, utc_now
from quizmaker.schemas.attempt import McqAttemptSchema

logger = logging.getLogger(__name__)

ATTEMPT_COLUMNS = "id, mcq_id, user_id, selected_choice_id, is_correct, attempted_at"


def record_attempt(db: Session, user_id: str, mcq_id: str, choice_id: str) -> McqAttemptSchema:
    """Store an attempt; correctness is copied from the choice as it is right now."""
    choice = query_first(db, "SELECT id, mcq_id, is_correct FROM mcq_choices WHERE id = ?", [choice_id])
    if choice is None:
        raise ChoiceNotFoundError()
    if choice["mcq_id"] != mcq_id:
        # A choice id taken from another question.
        raise ChoiceMismatchError()

    attempt_id = new_id()
    is_correct = bool(choice["is_correct"])
    mutate(
        db,
        f"INSERT INTO mcq_attempts ({ATTEMPT_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
        [attempt_id, mcq_id, user_id, choice_id, is_correct, utc_now()],
    )

    row = query_first(db, f"SELECT {ATTEMPT_COLUMNS} FROM mcq_attempts WHERE id = ?", [attempt_id])
    if row is None:
        raise ConsistencyError("Failed to retrieve attempt record")
    logger.info("Attempt recorded", extra={"mcq_id": mcq_id, "user_id": user_id, "is_correct": is_correct})
    return McqAttemptSchema.model_validate(row)


def list_attempts_by_mcq(db: Session, mcq_id: str, user_id: str | None = None) -> list[McqAttemptSchema]:
    sql = f"SELECT {ATTEMPT_COLUMNS} FROM mcq_attempts WHERE mcq_id = ?"
    params = [mcq_id]
    if user_id:
        sql += " AND user_id = ?"
        params.append(user_id)
    sql += " ORDER BY attempted_at DESC, id DESC"
    return [McqAttemptSchema.model_validate(row) for row in query(db, sql, params)]


def list_attempts_by_user(db: Session, user_id: str) -> list[McqAttemptSchema]:
    rows = query(
        db,
        f"SELECT {ATTEMPT_COLUMNS} FROM mcq_attempts WHERE user_id = ? ORDER BY attempted_at DESC, id DESC",
        [user_id],
    )
    return [McqAttemptSchema.model_validate(row) for row in rows]
