"""Pydantic schemas for MCQ attempts."""
from datetime import datetime

from pydantic import Field

from quizmaker.schemas.base import CamelSchema


class McqAttemptInputSchema(CamelSchema):
    selected_choice_id: str = Field(min_length=1)


class McqAttemptSchema(CamelSchema):
    id: str
    mcq_id: str
    user_id: str
    selected_choice_id: str
    is_correct: bool
    attempted_at: datetime
