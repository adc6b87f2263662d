"""Campus records and chat messages held by the record store."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ChatMessage:
    """One side of a chat turn. Append-only: never edited or deleted."""

    message: str
    is_ai: bool
    id: str = field(default_factory=_new_id)
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def role(self) -> str:
        return "assistant" if self.is_ai else "user"


@dataclass(frozen=True)
class Event:
    title: str
    date: str
    time: str
    location: str
    category: str
    description: str | None = None
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class Deadline:
    title: str
    due_date: str
    urgency: str
    course: str | None = None
    description: str | None = None
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class TutoringSession:
    tutor: str
    subject: str
    time: str
    location: str
    availability: str
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class CampusRecords:
    """Point-in-time copy of the campus data used to build a prompt."""

    events: list[Event] = field(default_factory=list)
    deadlines: list[Deadline] = field(default_factory=list)
    tutoring_sessions: list[TutoringSession] = field(default_factory=list)
