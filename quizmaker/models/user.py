"""User model: registered account. Username and email are unique ignoring case."""
from sqlalchemy import Column, DateTime, Index, String, func

from quizmaker.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True)  # 32-char lowercase hex
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    username = Column(String(30), nullable=False)  # stored as typed
    email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), nullable=False)


# Case-insensitive uniqueness lives in the storage layer as well as in the pre-checks.
Index("uq_users_username_lower", func.lower(User.username), unique=True)
Index("uq_users_email_lower", func.lower(User.email), unique=True)
