"""
Domain errors raised by the interview core.

Each error carries the HTTP status the API layer reports it with.
"""


class InterviewError(Exception):
    """Base class for interview domain errors."""

    status_code: int = 500
    default_message: str = "Interview error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class SessionNotFoundError(InterviewError):
    """Session does not exist or is not owned by the caller."""

    status_code = 404
    default_message = "Interview session not found"


class QuestionNotFoundError(InterviewError):
    status_code = 404
    default_message = "Question not found"


class StateTransitionError(InterviewError):
    """Raised when an invalid state transition is attempted."""

    status_code = 409
    default_message = "Invalid session state transition"
