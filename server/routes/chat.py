"""Chat endpoints: send a message, read the conversation history."""

import asyncio

from fastapi import APIRouter, Depends, HTTPException, status

from api.base_client import BaseAIClient
from server.dependencies import get_context_assembler, get_llm_client, get_store
from server.schemas.requests import ChatRequest
from server.schemas.responses import ChatExchangeDTO, ChatMessageDTO
from server.storage import RecordStore, StorageError
from tools.web import ContextAssembler
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Chat"])


@router.post("/chat", response_model=ChatExchangeDTO)
async def chat(
    request: ChatRequest,
    store: RecordStore = Depends(get_store),
    assembler: ContextAssembler = Depends(get_context_assembler),
    llm_client: BaseAIClient = Depends(get_llm_client),
):
    """Store the user's message, ask the model with campus and web context, store the reply."""
    try:
        user_message = store.create_chat_message(request.message, is_ai=False)
        records = store.snapshot()
        history = store.get_chat_messages()
    except StorageError as exc:
        logger.error(f"Failed to store user message: {exc}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to store chat message",
        ) from exc

    prompt = await assembler.build(
        request.message, records, history, exclude_message_id=user_message.id
    )

    response = await asyncio.to_thread(llm_client.get_completion, prompt.messages)

    if response.is_error:
        logger.error(
            "Chat turn failed at model call",
            extra={
                "extra_fields": {
                    "request_id": response.request_id,
                    "user_message_id": user_message.id,
                    "error_code": response.error.code,
                }
            },
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=response.error.message,
        )

    try:
        ai_message = store.create_chat_message(response.text, is_ai=True)
    except StorageError as exc:
        logger.error(
            f"Failed to store AI reply: {exc}",
            exc_info=True,
            extra={"extra_fields": {"user_message_id": user_message.id, "incomplete_turn": True}},
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to store AI reply",
        ) from exc

    return ChatExchangeDTO(
        user_message=ChatMessageDTO.from_record(user_message),
        ai_message=ChatMessageDTO.from_record(ai_message),
    )


@router.get("/chat/history", response_model=list[ChatMessageDTO])
async def chat_history(store: RecordStore = Depends(get_store)):
    """All stored chat messages, oldest first."""
    return [ChatMessageDTO.from_record(m) for m in store.get_chat_messages()]
