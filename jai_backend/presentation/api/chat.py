"""
Chat API Router - POST /chat.

Thin layer: validates the request body, builds a SendMessageCommand and maps
domain errors to HTTP errors. All routing, memory, persona and persistence
logic lives in SendMessageHandler.

Request:  {"prompt": "...", "conversationId": "..." | null}
Response: {"aiMessage": {"sender": "ai", "content": "..."}, "newConversationId": "..."}
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, status

from jai_backend.application.commands.chat.send_message import (
    SendMessageCommand,
    SendMessageHandler,
)
from jai_backend.application.dto.chat import AiMessageDTO, CamelModel
from jai_backend.domain.exceptions import (
    DomainValidationError,
    ProviderError,
    StorageError,
)
from jai_backend.domain.value_objects.conversation_id import ConversationId
from jai_backend.observability.metrics import MetricsErrorType, increment_error
from jai_backend.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)

CHAT_FAILED_DETAIL = "Failed to get a response from the AI model."


# ==================== REQUEST/RESPONSE MODELS ====================


class ChatRequest(CamelModel):
    """Prompt is optional here so a missing prompt maps to the domain 400."""

    prompt: Optional[str] = None
    conversation_id: Optional[str] = None


class ChatResponse(CamelModel):
    ai_message: AiMessageDTO
    new_conversation_id: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post(
    "",
    response_model=ChatResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
)
@inject
async def chat(
    request: ChatRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Answer a prompt, continuing or starting a conversation."""
    conversation_id = (
        ConversationId(request.conversation_id)
        if request.conversation_id and request.conversation_id.strip()
        else None
    )
    command = SendMessageCommand(
        user_id=current_user.user_id,
        prompt=request.prompt,
        conversation_id=conversation_id,
    )
    try:
        result = await handler.execute(command)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except StorageError as e:
        increment_error(MetricsErrorType.STORAGE_FAILED)
        logger.error(f"Error in /chat: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=CHAT_FAILED_DETAIL
        ) from e
    except ProviderError as e:
        logger.error(f"Error in /chat: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=CHAT_FAILED_DETAIL
        ) from e

    return ChatResponse(
        ai_message=AiMessageDTO(content=result.ai_message.content),
        new_conversation_id=result.conversation_id.value,
    )
