"""
Models package: campus records and completion result objects.
"""

from .campus import CampusRecords, ChatMessage, Deadline, Event, TutoringSession
from .completion import CompletionResponse, NormalizedError, TokenUsage

__all__ = [
    "CampusRecords",
    "ChatMessage",
    "CompletionResponse",
    "Deadline",
    "Event",
    "NormalizedError",
    "TokenUsage",
    "TutoringSession",
]
