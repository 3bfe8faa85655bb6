"""
Conversations API Router - list, fetch and delete a user's conversations.

Every endpoint is owner-scoped: a conversation that exists but belongs to
another user is indistinguishable from one that does not exist (404).

Flow:
  HTTP Request → Router → Query/Command → Handler → Repository → Database
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from jai_backend.application.commands.conversations import (
    DeleteConversationCommand,
    DeleteConversationHandler,
)
from jai_backend.application.dto.conversation import (
    ConversationDTO,
    ConversationSummaryDTO,
)
from jai_backend.application.queries.conversations import (
    GetConversationHandler,
    GetConversationQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from jai_backend.domain.exceptions import EntityNotFoundError, StorageError
from jai_backend.domain.value_objects.conversation_id import ConversationId
from jai_backend.observability.metrics import MetricsErrorType, increment_error
from jai_backend.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


class DeleteConversationResponse(BaseModel):
    message: str = "Conversation deleted successfully."


NOT_FOUND_DETAIL = "Conversation not found or access denied."


def _conversation_id(raw: str) -> ConversationId:
    """A blank id names no conversation."""
    try:
        return ConversationId(raw)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL) from e


def _storage_failure(detail: str, e: StorageError) -> HTTPException:
    increment_error(MetricsErrorType.STORAGE_FAILED)
    logger.error(f"{detail} {e}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.get(
    "",
    response_model=list[ConversationSummaryDTO],
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List the user's conversations, newest first (no messages)."""
    try:
        summaries = await handler.execute(ListConversationsQuery(user_id=current_user.user_id))
    except StorageError as e:
        raise _storage_failure("Failed to fetch conversations.", e) from e

    logger.info(f"Fetched {len(summaries)} conversations for user {current_user.user_id}")
    return [ConversationSummaryDTO.from_entity(s) for s in summaries]


@router.get(
    "/{conversation_id}",
    response_model=ConversationDTO,
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_conversation(
    conversation_id: str,
    handler: FromDishka[GetConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Get one conversation with its full message list."""
    query = GetConversationQuery(
        conversation_id=_conversation_id(conversation_id),
        user_id=current_user.user_id,
    )
    try:
        conversation = await handler.execute(query)
    except EntityNotFoundError as e:
        logger.info(f"Conversation {conversation_id} not found for user {current_user.user_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except StorageError as e:
        raise _storage_failure("Failed to fetch conversation.", e) from e

    return ConversationDTO.from_entity(conversation)


@router.delete(
    "/{conversation_id}",
    response_model=DeleteConversationResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_conversation(
    conversation_id: str,
    handler: FromDishka[DeleteConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Delete a conversation and all its messages."""
    command = DeleteConversationCommand(
        conversation_id=_conversation_id(conversation_id),
        user_id=current_user.user_id,
    )
    try:
        await handler.execute(command)
    except EntityNotFoundError as e:
        logger.info(
            f"Conversation {conversation_id} not found or access denied "
            f"for user {current_user.user_id}"
        )
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except StorageError as e:
        raise _storage_failure("Failed to delete conversation.", e) from e

    logger.info(f"Conversation {conversation_id} deleted by user {current_user.user_id}")
    return DeleteConversationResponse()
