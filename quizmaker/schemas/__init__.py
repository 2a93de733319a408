from quizmaker.schemas.attempt import McqAttemptInputSchema, McqAttemptSchema
from quizmaker.schemas.mcq import (
    McqChoiceInputSchema,
    McqChoiceSchema,
    McqCreateSchema,
    McqUpdateSchema,
    McqWithChoicesSchema,
    PaginatedMcqsSchema,
    PaginationSchema,
)
from quizmaker.schemas.user import (
    AuthResultSchema,
    LoginSchema,
    UserCreateSchema,
    UserSchema,
    UserSessionSchema,
)

__all__ = [
    "AuthResultSchema",
    "LoginSchema",
    "McqAttemptInputSchema",
    "McqAttemptSchema",
    "McqChoiceInputSchema",
    "McqChoiceSchema",
    "McqCreateSchema",
    "McqUpdateSchema",
    "McqWithChoicesSchema",
    "PaginatedMcqsSchema",
    "PaginationSchema",
    "UserCreateSchema",
    "UserSchema",
    "UserSessionSchema",
]
