"""In-memory record store for chat messages and campus records."""

import threading
from abc import ABC, abstractmethod

from models.campus import CampusRecords, ChatMessage, Deadline, Event, TutoringSession
from utils.logger import get_logger

logger = get_logger(__name__)


class StorageError(RuntimeError):
    """A record could not be read or written."""


class RecordStore(ABC):
    """Persistence interface used by the routes. Lists come back in insertion order."""

    @abstractmethod
    def get_chat_messages(self) -> list[ChatMessage]: ...

    @abstractmethod
    def create_chat_message(self, message: str, is_ai: bool) -> ChatMessage: ...

    @abstractmethod
    def get_events(self) -> list[Event]: ...

    @abstractmethod
    def create_event(self, event: Event) -> Event: ...

    @abstractmethod
    def get_deadlines(self) -> list[Deadline]: ...

    @abstractmethod
    def create_deadline(self, deadline: Deadline) -> Deadline: ...

    @abstractmethod
    def get_tutoring_sessions(self) -> list[TutoringSession]: ...

    @abstractmethod
    def create_tutoring_session(self, session: TutoringSession) -> TutoringSession: ...

    def snapshot(self) -> CampusRecords:
        return CampusRecords(
            events=self.get_events(),
            deadlines=self.get_deadlines(),
            tutoring_sessions=self.get_tutoring_sessions(),
        )


SEED_EVENTS = [
    Event(
        title="AI Workshop: Building Campus Apps",
        date="Oct 30, 2025",
        time="2:00 PM - 4:00 PM",
        location="Engineering Building, Room 205",
        category="Academic",
        description="Learn how to build AI-powered applications for campus use.",
    ),
    Event(
        title="Career Fair 2025",
        date="Nov 5, 2025",
        time="10:00 AM - 4:00 PM",
        location="Student Center, Main Hall",
        category="Career",
        description="Meet with top employers and explore internship opportunities.",
    ),
    Event(
        title="Fall Concert Series",
        date="Nov 8, 2025",
        time="7:00 PM - 9:00 PM",
        location="Performing Arts Center",
        category="Arts",
    ),
]

SEED_DEADLINES = [
    Deadline(
        title="Project Proposal Submission",
        due_date="Oct 28, 2025 11:59 PM",
        course="CS 401: Senior Capstone",
        urgency="today",
        description="Submit your final project proposal.",
    ),
    Deadline(
        title="Midterm Exam",
        due_date="Nov 2, 2025 2:00 PM",
        course="MATH 301: Linear Algebra",
        urgency="thisWeek",
    ),
]

SEED_TUTORING = [
    TutoringSession(
        tutor="Dr. Sarah Johnson",
        subject="Calculus I & II",
        time="Today, 2:00 PM - 4:00 PM",
        location="Building A, Room 305",
        availability="Available",
    ),
    TutoringSession(
        tutor="Prof. Michael Chen",
        subject="Computer Science",
        time="Tomorrow, 3:00 PM - 5:00 PM",
        location="CS Lab, Room 120",
        availability="Limited",
    ),
]


class InMemoryRecordStore(RecordStore):
    """
    Process-local store. Lost on restart, never evicts.

    Dicts keep insertion order; a lock makes each single read or write
    atomic under concurrent requests.
    """

    def __init__(self, seed: bool = True):
        self._lock = threading.Lock()
        self._chat_messages: dict[str, ChatMessage] = {}
        self._events: dict[str, Event] = {}
        self._deadlines: dict[str, Deadline] = {}
        self._tutoring_sessions: dict[str, TutoringSession] = {}

        if seed:
            for event in SEED_EVENTS:
                self.create_event(event)
            for deadline in SEED_DEADLINES:
                self.create_deadline(deadline)
            for session in SEED_TUTORING:
                self.create_tutoring_session(session)
            logger.info(
                "Record store seeded",
                extra={
                    "extra_fields": {
                        "events": len(self._events),
                        "deadlines": len(self._deadlines),
                        "tutoring_sessions": len(self._tutoring_sessions),
                    }
                },
            )

    def get_chat_messages(self) -> list[ChatMessage]:
        with self._lock:
            return list(self._chat_messages.values())

    def create_chat_message(self, message: str, is_ai: bool) -> ChatMessage:
        record = ChatMessage(message=message, is_ai=is_ai)
        with self._lock:
            self._chat_messages[record.id] = record
        return record

    def get_events(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    def create_event(self, event: Event) -> Event:
        with self._lock:
            self._events[event.id] = event
        return event

    def get_deadlines(self) -> list[Deadline]:
        with self._lock:
            return list(self._deadlines.values())

    def create_deadline(self, deadline: Deadline) -> Deadline:
        with self._lock:
            self._deadlines[deadline.id] = deadline
        return deadline

    def get_tutoring_sessions(self) -> list[TutoringSession]:
        with self._lock:
            return list(self._tutoring_sessions.values())

    def create_tutoring_session(self, session: TutoringSession) -> TutoringSession:
        with self._lock:
            self._tutoring_sessions[session.id] = session
        return session
