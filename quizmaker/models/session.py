"""UserSession model: one opaque bearer token per login; a user may hold many."""
from sqlalchemy import Column, DateTime, ForeignKey, String, func

from quizmaker.db.session import Base


class UserSession(Base):
    __tablename__ = "user_sessions"

    id = Column(String(32), primary_key=True)
    user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    session_token = Column(String(64), unique=True, nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
