"""
Conversation service orchestrator.

Coordinates conversation lifecycle and persisted chat: message storage,
history windowing, law context resolution and automatic titling.

Dependencies: sqlalchemy, envreg.boundary.db.CRUD, envreg.core
System role: Conversation use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from envreg.application.services.chat_service import ChatService
from envreg.boundary.db.CRUD.conversation_crud import conversation_crud
from envreg.boundary.db.CRUD.message_crud import message_crud
from envreg.boundary.db.models.conversation_model import ConversationModel
from envreg.boundary.db.models.message_model import MessageModel
from envreg.core.exceptions import ConversationNotFoundError
from envreg.core.law_catalog import LawCatalog
from envreg.core.prompts import build_research_context
from envreg.models.chat import (
    ChatHistoryResponse,
    ChatMessageResponse,
    ChatTurn,
    ConversationChatRequest,
    ConversationChatResponse,
)
from envreg.models.conversation import (
    DEFAULT_CONVERSATION_TITLE,
    ConversationResponse,
    CreateConversationRequest,
)

logger = logging.getLogger(__name__)

HISTORY_WINDOW = 20
TITLE_MAX_LENGTH = 50


def title_from_message(message: str) -> str:
    """First TITLE_MAX_LENGTH characters of the message, with "..." when cut."""
    if len(message) > TITLE_MAX_LENGTH:
        return message[:TITLE_MAX_LENGTH] + "..."
    return message


def _to_conversation_response(conversation: ConversationModel) -> ConversationResponse:
    return ConversationResponse(
        id=conversation.id,
        user_id=conversation.user_id,
        title=conversation.title,
        regulatory_filters=conversation.regulatory_filters or [],
        area_filter=conversation.area_filter,
        created_at=conversation.created_at,
        updated_at=conversation.updated_at,
    )


def _to_message_response(message: MessageModel) -> ChatMessageResponse:
    return ChatMessageResponse(
        id=message.id,
        role=message.role,
        content=message.content,
        citations=message.citations or [],
        created_at=message.created_at,
    )


class ConversationService:
    """Conversation service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        chat_service: ChatService,
        law_catalog: LawCatalog,
    ) -> None:
        """
        Initialize conversation service.

        Args:
            db: Async SQLAlchemy session
            chat_service: Completion service used for each exchange
            law_catalog: Catalog used to resolve selected law ids
        """
        self.db = db
        self.chat_service = chat_service
        self.law_catalog = law_catalog

    async def _get_or_raise(self, conversation_id: UUID) -> ConversationModel:
        conversation = await conversation_crud.get_by_id(self.db, conversation_id)
        if conversation is None:
            raise ConversationNotFoundError(str(conversation_id))
        return conversation

    async def create_conversation(
        self,
        request: CreateConversationRequest,
    ) -> ConversationResponse:
        """
        Create a new conversation for a user.

        Args:
            request: Owner, optional title and filters

        Returns:
            ConversationResponse: Created conversation
        """
        conversation = await conversation_crud.create(
            self.db,
            user_id=request.user_id,
            title=request.title or DEFAULT_CONVERSATION_TITLE,
            regulatory_filters=[scope.value for scope in request.regulatory_filters],
            area_filter=request.area_filter.value if request.area_filter else None,
        )
        await self.db.commit()

        logger.info(
            "Conversation created",
            extra={"conversation_id": str(conversation.id), "user_id": request.user_id},
        )
        return _to_conversation_response(conversation)

    async def list_conversations(self, user_id: str) -> list[ConversationResponse]:
        """List a user's conversations, most recently active first."""
        conversations = await conversation_crud.list_by_user(self.db, user_id)
        return [_to_conversation_response(c) for c in conversations]

    async def get_conversation(self, conversation_id: UUID) -> ConversationResponse:
        """
        Get conversation by ID.

        Raises:
            ConversationNotFoundError: If conversation does not exist
        """
        return _to_conversation_response(await self._get_or_raise(conversation_id))

    async def rename_conversation(
        self,
        conversation_id: UUID,
        title: str,
    ) -> ConversationResponse:
        """
        Change a conversation's title.

        Raises:
            ConversationNotFoundError: If conversation does not exist
        """
        await self._get_or_raise(conversation_id)
        conversation = await conversation_crud.update_by_id(
            self.db, conversation_id, title=title
        )
        await self.db.commit()
        return _to_conversation_response(conversation)

    async def delete_conversation(self, conversation_id: UUID) -> None:
        """
        Delete a conversation and all its messages.

        Raises:
            ConversationNotFoundError: If conversation does not exist
        """
        conversation = await self._get_or_raise(conversation_id)
        # ORM delete so the messages cascade also applies on SQLite.
        await self.db.delete(conversation)
        await self.db.commit()
        logger.info("Conversation deleted", extra={"conversation_id": str(conversation_id)})

    async def get_messages(self, conversation_id: UUID) -> ChatHistoryResponse:
        """
        Get every stored message of a conversation, oldest first.

        Raises:
            ConversationNotFoundError: If conversation does not exist
        """
        await self._get_or_raise(conversation_id)
        messages = await message_crud.list_by_conversation(self.db, conversation_id)
        return ChatHistoryResponse(
            messages=[_to_message_response(m) for m in messages],
            total=len(messages),
        )

    async def chat(
        self,
        conversation_id: UUID,
        request: ConversationChatRequest,
        history_window: int = HISTORY_WINDOW,
    ) -> ConversationChatResponse:
        """
        Process a message through the persisted conversation flow.

        Flow:
        1. Validate conversation exists and resolve selected laws
        2. Store the user message
        3. Fetch the recent history window
        4. Complete with the selected laws as research context
        5. Store the assistant message with its citations
        6. Title the conversation after its first message

        Args:
            conversation_id: Conversation UUID
            request: User message, selected law ids and optional context
            history_window: Number of recent messages sent to the model

        Returns:
            ConversationChatResponse: Answer, citations and stored message id

        Raises:
            ConversationNotFoundError: If conversation does not exist
            LawNotFoundError: If a selected law id is unknown
            LLMGatewayError: If the gateway call fails
        """
        await self._get_or_raise(conversation_id)
        laws = self.law_catalog.get_many(request.selected_law_ids)
        is_first_exchange = (
            await message_crud.count_by_conversation(self.db, conversation_id) == 0
        )

        await message_crud.create(
            self.db,
            conversation_id=conversation_id,
            role="user",
            content=request.message,
            citations=[],
        )
        # Committed before the model call so the question survives a gateway failure.
        await self.db.commit()

        history = await message_crud.get_recent(self.db, conversation_id, history_window)
        turns = [ChatTurn(role=m.role, content=m.content) for m in history]

        system_context = "\n\n".join(
            part for part in (build_research_context(laws), request.system_context) if part
        )
        response = await self.chat_service.answer(
            turns,
            system_context=system_context or None,
        )

        assistant_message = await message_crud.create(
            self.db,
            conversation_id=conversation_id,
            role="assistant",
            content=response.content,
            citations=[c.model_dump(mode="json", by_alias=True) for c in response.citations],
        )

        if is_first_exchange:
            await conversation_crud.update_by_id(
                self.db, conversation_id, title=title_from_message(request.message)
            )
        else:
            await conversation_crud.touch(self.db, conversation_id)
        await self.db.commit()

        logger.info(
            "Conversation exchange stored",
            extra={
                "conversation_id": str(conversation_id),
                "history_size": len(turns),
                "citation_count": len(response.citations),
            },
        )
        return ConversationChatResponse(
            content=response.content,
            citations=response.citations,
            conversation_id=conversation_id,
            message_id=assistant_message.id,
        )
