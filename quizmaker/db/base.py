"""Declarative base with every model imported, for create_all and Alembic."""
from quizmaker.db.session import Base

# Import all models so Alembic can see them
from quizmaker.models.attempt import McqAttempt  # noqa: F401
from quizmaker.models.mcq import Mcq, McqChoice  # noqa: F401
from quizmaker.models.session import UserSession  # noqa: F401
from quizmaker.models.user import User  # noqa: F401

__all__ = ["Base", "User", "UserSession", "Mcq", "McqChoice", "McqAttempt"]
