"""Status code classification for write operations.

Each table maps a known HTTP status to the outcome shown to the user.
Lookups fall back to a default, so every status has exactly one outcome.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .models import AnswerError


@dataclass(frozen=True)
class Outcome:
    """Business result of a completed request."""

    message: str
    success: bool
    # Extra text printed below the message (server reason, compiler output)
    detail: Optional[str] = None
    error: Optional[AnswerError] = None


USER_CREATED = "User created."
USER_NOT_CREATED = "User accepted but not created."
ANSWER_CREATED = "Answer created."
ANSWER_NOT_CREATED = "Answer accepted but not created."
ANSWER_REJECTED = "Answer rejected."
REQUEST_FAILED = "Request failed."

ANSWER_DELETED = "Answer deleted successfully."
PERMISSION_NOT_MET = "Permission not met: you can only delete your own answers."
ANSWER_NOT_FOUND = "Answer not found."
INVALID_CREDENTIALS = "Invalid credentials."
UNRECOGNIZED_REASON = "Deletion failed for an unrecognized reason."


SIGNUP_OUTCOMES: Dict[int, Outcome] = {
    201: Outcome(USER_CREATED, success=True),
    200: Outcome(USER_NOT_CREATED, success=True),
}

ANSWER_POST_OUTCOMES: Dict[int, Outcome] = {
    201: Outcome(ANSWER_CREATED, success=True),
    200: Outcome(ANSWER_NOT_CREATED, success=True),
}

DELETE_OUTCOMES: Dict[int, Outcome] = {
    204: Outcome(ANSWER_DELETED, success=True),
    403: Outcome(PERMISSION_NOT_MET, success=False),
    404: Outcome(ANSWER_NOT_FOUND, success=False),
    401: Outcome(INVALID_CREDENTIALS, success=False),
}


def classify_signup(status: int, body: str) -> Outcome:
    """Outcome of POST /user. Unknown statuses echo the body as the reason."""
    return SIGNUP_OUTCOMES.get(
        status, Outcome(REQUEST_FAILED, success=False, detail=body)
    )


def classify_answer_post(
    status: int, body: str, error: Optional[AnswerError] = None
) -> Outcome:
    """Outcome of POST /answer/{id}.

    ``error`` is the decoded 422 body; the caller decodes it because only
    the caller knows how to turn a bad payload into a fatal error.
    """
    if status == 422 and error is not None:
        return Outcome(ANSWER_REJECTED, success=False, error=error)
    return ANSWER_POST_OUTCOMES.get(
        status, Outcome(REQUEST_FAILED, success=False, detail=body)
    )


def classify_delete(status: int) -> Outcome:
    """Outcome of DELETE /answer/{id}.

    Unknown statuses collapse into one generic message; the status and
    body are not shown.
    """
    return DELETE_OUTCOMES.get(status, Outcome(UNRECOGNIZED_REASON, success=False))
