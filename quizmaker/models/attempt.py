"""McqAttempt model: one answer by one user; is_correct is a snapshot of the chosen choice."""
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, func

from quizmaker.db.session import Base


class McqAttempt(Base):
    __tablename__ = "mcq_attempts"
    __table_args__ = (CheckConstraint("is_correct IN (0, 1)", name="ck_mcq_attempts_is_correct"),)

    id = Column(String(32), primary_key=True)
    mcq_id = Column(String(32), ForeignKey("mcqs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    selected_choice_id = Column(
        String(32), ForeignKey("mcq_choices.id", ondelete="CASCADE"), nullable=False
    )
    is_correct = Column(Integer, nullable=False, default=0)
    attempted_at = Column(DateTime, server_default=func.now(), nullable=False)
