"""Pydantic schemas for MCQs, their choices and paginated listings."""
from datetime import datetime

from pydantic import Field, model_validator

from quizmaker.schemas.base import CamelSchema

MIN_CHOICES = 2
MAX_CHOICES = 4


class McqChoiceInputSchema(CamelSchema):
    choice_text: str = Field(min_length=1)
    is_correct: bool
    display_order: int = Field(ge=0)


class McqCreateSchema(CamelSchema):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=500)
    question_text: str = Field(min_length=1, max_length=1000)
    choices: list[McqChoiceInputSchema] = Field(min_length=MIN_CHOICES, max_length=MAX_CHOICES)

    @model_validator(mode="after")
    def exactly_one_correct(self):
        correct = sum(1 for c in self.choices if c.is_correct)
        if correct != 1:
            raise ValueError("Exactly one choice must be marked as correct")
        return self


class McqUpdateSchema(McqCreateSchema):
    """Same rules as create; the choice set is replaced wholesale."""


class McqChoiceSchema(CamelSchema):
    id: str
    mcq_id: str
    choice_text: str
    is_correct: bool  # stored as 0/1
    display_order: int
    created_at: datetime


class McqWithChoicesSchema(CamelSchema):
    id: str
    title: str
    description: str | None = None
    question_text: str
    created_by_user_id: str
    created_at: datetime
    updated_at: datetime
    choices: list[McqChoiceSchema] = []


class PaginationSchema(CamelSchema):
    page: int
    limit: int
    total: int
    total_pages: int


class PaginatedMcqsSchema(CamelSchema):
    data: list[McqWithChoicesSchema]
    pagination: PaginationSchema
