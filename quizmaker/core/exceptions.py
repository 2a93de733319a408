"""Domain errors raised by the quizmaker core.

Each error carries a stable ``code`` and the HTTP ``status_code`` the API shell
renders it with. Route handlers may also catch them individually.
"""


class QuizmakerError(Exception):
    """Base class for all domain errors."""

    code = "error"
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(QuizmakerError):
    code = "not_found"
    status_code = 404
    default_message = "Not found"


class PermissionDeniedError(QuizmakerError):
    code = "permission_denied"
    status_code = 403
    default_message = "You do not have permission to perform this action"


class DuplicateUsernameError(QuizmakerError):
    code = "duplicate_username"
    status_code = 409
    default_message = "Username already exists"


class DuplicateEmailError(QuizmakerError):
    code = "duplicate_email"
    status_code = 409
    default_message = "Email already exists"


class InvalidCredentialsError(QuizmakerError):
    # Same message for unknown user and wrong password.
    code = "invalid_credentials"
    status_code = 401
    default_message = "Invalid credentials"


class ChoiceNotFoundError(NotFoundError):
    code = "choice_not_found"
    default_message = "Choice not found"


class ChoiceMismatchError(QuizmakerError):
    code = "choice_mismatch"
    status_code = 400
    default_message = "Choice does not belong to this MCQ"


class ConsistencyError(QuizmakerError):
    """A write succeeded but the mandatory re-read found nothing."""

    code = "internal_error"
    status_code = 500
    default_message = "Failed to retrieve written record"


class ConditionFailedError(QuizmakerError):
    """A required statement in a batch matched no rows; the batch was rolled back."""

    code = "condition_failed"
    status_code = 409
    default_message = "Write precondition no longer holds"
