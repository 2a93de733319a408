from quizmaker.services.attempts import list_attempts_by_mcq, list_attempts_by_user, record_attempt
from quizmaker.services.auth import get_current_user, login, logout, register, verify_session
from quizmaker.services.mcqs import (
    create_mcq,
    delete_mcq,
    get_mcq_by_id,
    list_mcqs,
    update_mcq,
    verify_mcq_ownership,
)
from quizmaker.services.sessions import cleanup_expired_sessions, validate_session_token

__all__ = [
    "cleanup_expired_sessions",
    "create_mcq",
    "delete_mcq",
    "get_current_user",
    "get_mcq_by_id",
    "list_attempts_by_mcq",
    "list_attempts_by_user",
    "list_mcqs",
    "login",
    "logout",
    "record_attempt",
    "register",
    "update_mcq",
    "validate_session_token",
    "verify_mcq_ownership",
    "verify_session",
]
