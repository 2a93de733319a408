from quizmaker.models.user import User
from quizmaker.models.session import UserSession
from quizmaker.models.mcq import Mcq, McqChoice
from quizmaker.models.attempt import McqAttempt

__all__ = ["User", "UserSession", "Mcq", "McqChoice", "McqAttempt"]
