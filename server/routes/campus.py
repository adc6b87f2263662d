"""Campus data endpoints: events, deadlines, tutoring sessions."""

from fastapi import APIRouter, Depends

from server.dependencies import get_store
from server.schemas.responses import DeadlineDTO, EventDTO, TutoringSessionDTO
from server.storage import RecordStore

router = APIRouter(prefix="/api", tags=["Campus"])


@router.get("/events", response_model=list[EventDTO])
async def list_events(store: RecordStore = Depends(get_store)):
    return [EventDTO.from_record(e) for e in store.get_events()]


@router.get("/deadlines", response_model=list[DeadlineDTO])
async def list_deadlines(store: RecordStore = Depends(get_store)):
    return [DeadlineDTO.from_record(d) for d in store.get_deadlines()]


@router.get("/tutoring", response_model=list[TutoringSessionDTO])
async def list_tutoring_sessions(store: RecordStore = Depends(get_store)):
    return [TutoringSessionDTO.from_record(t) for t in store.get_tutoring_sessions()]
