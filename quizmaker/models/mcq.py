"""Mcq and McqChoice models. Choices go away with their MCQ (ON DELETE CASCADE)."""
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, func

from quizmaker.db.session import Base


class Mcq(Base):
    __tablename__ = "mcqs"

    id = Column(String(32), primary_key=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    question_text = Column(Text, nullable=False)
    created_by_user_id = Column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), nullable=False)


class McqChoice(Base):
    __tablename__ = "mcq_choices"
    __table_args__ = (CheckConstraint("is_correct IN (0, 1)", name="ck_mcq_choices_is_correct"),)

    id = Column(String(32), primary_key=True)
    mcq_id = Column(String(32), ForeignKey("mcqs.id", ondelete="CASCADE"), nullable=False, index=True)
    choice_text = Column(Text, nullable=False)
    is_correct = Column(Integer, nullable=False, default=0)  # 0/1
    display_order = Column(Integer, nullable=False, default=0)  # 0-based
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
