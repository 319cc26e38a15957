"""Data models for codeprobs API entities."""

from dataclasses import dataclass, field
from typing import Optional


def _field(data: dict, key: str, kind: type, optional: bool = False):
    """Fetch ``data[key]`` and check its JSON type. Raises KeyError or TypeError."""
    value = data[key] if not optional else data.get(key)
    if value is None and optional:
        return None
    # bool is an int subclass
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise TypeError(f"{key!r} should be {kind.__name__}, got {value!r}")
    return value


@dataclass
class User:
    """A leaderboard entry."""

    username: str
    points: int

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(username=_field(data, "username", str), points=_field(data, "points", int))


@dataclass
class Credentials:
    """Name and password for signup and answer writes. Never persisted."""

    name: str
    password: str = field(repr=False)

    def as_auth(self) -> tuple:
        """Basic auth pair in the form requests expects."""
        return (self.name, self.password)

    def as_signup_body(self) -> dict:
        return {"username": self.name, "password": self.password}


@dataclass
class Answer:
    """An answer posted to a problem."""

    id: int
    user: User
    language: str
    content: str
    upvote_count: int
    downvote_count: int

    @classmethod
    def from_dict(cls, data: dict) -> "Answer":
        return cls(
            id=_field(data, "id", int),
            user=User.from_dict(_field(data, "user", dict)),
            language=_field(data, "language", str),
            content=_field(data, "content", str),
            upvote_count=_field(data, "upvoteCount", int),
            downvote_count=_field(data, "downvoteCount", int),
        )


@dataclass
class AnswerError:
    """Why the server refused to run or accept an answer (HTTP 422)."""

    reason: str
    stdout: Optional[str] = None
    stderr: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "AnswerError":
        return cls(
            reason=_field(data, "reason", str),
            stdout=_field(data, "stdout", str, optional=True),
            stderr=_field(data, "stderr", str, optional=True),
        )
