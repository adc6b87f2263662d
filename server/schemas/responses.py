"""Pydantic response models (DTOs) for FastAPI endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from models.campus import ChatMessage, Deadline, Event, TutoringSession


class CamelDTO(BaseModel):
    # Field names on the wire follow the web client (isAI, dueDate)
    model_config = ConfigDict(populate_by_name=True)


class ChatMessageDTO(CamelDTO):
    id: str
    message: str
    is_ai: bool = Field(alias="isAI")
    timestamp: datetime

    @classmethod
    def from_record(cls, record: ChatMessage):
        return cls(id=record.id, message=record.message, is_ai=record.is_ai, timestamp=record.timestamp)


class ChatExchangeDTO(CamelDTO):
    user_message: ChatMessageDTO = Field(alias="userMessage")
    ai_message: ChatMessageDTO = Field(alias="aiMessage")


class EventDTO(CamelDTO):
    id: str
    title: str
    date: str
    time: str
    location: str
    category: str
    description: str | None = None

    @classmethod
    def from_record(cls, record: Event):
        return cls(
            id=record.id,
            title=record.title,
            date=record.date,
            time=record.time,
            location=record.location,
            category=record.category,
            description=record.description,
        )


class DeadlineDTO(CamelDTO):
    id: str
    title: str
    due_date: str = Field(alias="dueDate")
    course: str | None = None
    urgency: str
    description: str | None = None

    @classmethod
    def from_record(cls, record: Deadline):
        return cls(
            id=record.id,
            title=record.title,
            due_date=record.due_date,
            course=record.course,
            urgency=record.urgency,
            description=record.description,
        )


class TutoringSessionDTO(CamelDTO):
    id: str
    tutor: str
    subject: str
    time: str
    location: str
    availability: str

    @classmethod
    def from_record(cls, record: TutoringSession):
        return cls(
            id=record.id,
            tutor=record.tutor,
            subject=record.subject,
            time=record.time,
            location=record.location,
            availability=record.availability,
        )


class HealthResponseDTO(BaseModel):
    status: str
    timestamp: str
    version: str = "1.0.0"
