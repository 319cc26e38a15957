"""Client module for codeprobs API interaction."""

from .client import CodeprobsClient
from .models import User, Credentials, Answer, AnswerError
from .outcomes import Outcome

__all__ = [
    "CodeprobsClient",
    "User",
    "Credentials",
    "Answer",
    "AnswerError",
    "Outcome",
]
