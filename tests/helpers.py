"""Plain helpers shared by test modules."""
from sqlalchemy.orm import Session

from quizmaker.db.client import query_first
from quizmaker.schemas.mcq import McqChoiceInputSchema, McqCreateSchema

TEST_PASSWORD = "Passw0rd123"


def build_mcq_input(
    title: str = "Capital of France",
    choices: list[tuple[str, bool]] | None = None,
    description: str | None = "Geography warm-up",
    question_text: str = "Which city is the capital of France?",
) -> McqCreateSchema:
    choices = choices or [("Berlin", False), ("Paris", True)]
    return McqCreateSchema(
        title=title,
        description=description,
        question_text=question_text,
        choices=[
            McqChoiceInputSchema(choice_text=text, is_correct=correct, display_order=i)
            for i, (text, correct) in enumerate(choices)
        ],
    )


def count_rows(db: Session, table: str, where: str = "", params: list | None = None) -> int:
    sql = f"SELECT COUNT(*) AS total FROM {table}" + (f" WHERE {where}" if where else "")
    return query_first(db, sql, params or [])["total"]
