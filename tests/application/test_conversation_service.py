"""
Test suite for ConversationService.

Runs against the in-memory SQLite database with a real ChatService over a
mocked LLM gateway client.

System role: Verification of conversation orchestration layer
"""

import uuid
from unittest.mock import MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from envreg.application.services.chat_service import ChatService
from envreg.application.services.conversation_service import (
    ConversationService,
    title_from_message,
)
from envreg.core.citation_extractor import CitationExtractor
from envreg.core.exceptions import (
    ConversationNotFoundError,
    LawNotFoundError,
    LLMGatewayError,
)
from envreg.core.law_catalog import LawCatalog
from envreg.models.chat import ConversationChatRequest
from envreg.models.common import AreaOfInterest, RegulatoryScope
from envreg.models.conversation import CreateConversationRequest


@pytest.fixture
def conversation_service(
    test_async_db: AsyncSession,
    mock_llm_client: MagicMock,
    citation_extractor: CitationExtractor,
    law_catalog: LawCatalog,
) -> ConversationService:
    """Provide ConversationService bound to the SQLite test session."""
    return ConversationService(
        db=test_async_db,
        chat_service=ChatService(llm_client=mock_llm_client, extractor=citation_extractor),
        law_catalog=law_catalog,
    )


class TestTitleFromMessage:
    """Automatic conversation titles."""

    def test_short_message_should_be_kept(self) -> None:
        assert title_from_message("What is D.Lgs. 152/2006?") == "What is D.Lgs. 152/2006?"

    def test_long_message_should_be_cut_at_fifty_with_ellipsis(self) -> None:
        message = "a" * 60

        assert title_from_message(message) == "a" * 50 + "..."

    def test_exactly_fifty_characters_should_not_get_ellipsis(self) -> None:
        assert title_from_message("b" * 50) == "b" * 50


class TestConversationLifecycle:
    """Create / list / get / rename / delete."""

    @pytest.mark.asyncio
    async def test_create_should_persist_filters(
        self,
        conversation_service: ConversationService,
        user_id: str,
    ) -> None:
        # Arrange
        request = CreateConversationRequest(
            user_id=user_id,
            regulatory_filters=[RegulatoryScope.NATIONAL],
            area_filter=AreaOfInterest.SEWAGE,
        )

        # Act
        created = await conversation_service.create_conversation(request)
        fetched = await conversation_service.get_conversation(created.id)

        # Assert
        assert fetched.title == "New Chat"
        assert fetched.regulatory_filters == [RegulatoryScope.NATIONAL]
        assert fetched.area_filter == AreaOfInterest.SEWAGE

    @pytest.mark.asyncio
    async def test_list_should_only_return_user_conversations(
        self,
        conversation_service: ConversationService,
        user_id: str,
    ) -> None:
        # Arrange
        await conversation_service.create_conversation(CreateConversationRequest(user_id=user_id))
        await conversation_service.create_conversation(CreateConversationRequest(user_id="someone-else"))

        # Act
        conversations = await conversation_service.list_conversations(user_id)

        # Assert
        assert len(conversations) == 1
        assert conversations[0].user_id == user_id

    @pytest.mark.asyncio
    async def test_rename_should_update_title(
        self,
        conversation_service: ConversationService,
        user_id: str,
    ) -> None:
        created = await conversation_service.create_conversation(CreateConversationRequest(user_id=user_id))

        renamed = await conversation_service.rename_conversation(created.id, "Discharge permits")

        assert renamed.title == "Discharge permits"

    @pytest.mark.asyncio
    async def test_delete_should_remove_conversation_and_messages(
        self,
        conversation_service: ConversationService,
        user_id: str,
    ) -> None:
        # Arrange
        created = await conversation_service.create_conversation(CreateConversationRequest(user_id=user_id))
        await conversation_service.chat(created.id, ConversationChatRequest(message="Hello"))

        # Act
        await conversation_service.delete_conversation(created.id)

        # Assert
        with pytest.raises(ConversationNotFoundError):
            await conversation_service.get_messages(created.id)

    @pytest.mark.asyncio
    async def test_unknown_conversation_should_raise_not_found(
        self,
        conversation_service: ConversationService,
    ) -> None:
        with pytest.raises(ConversationNotFoundError):
            await conversation_service.get_conversation(uuid.uuid4())


class TestConversationChat:
    """ConversationService.chat()."""

    @pytest.mark.asyncio
    async def test_chat_should_store_both_messages_with_citations(
        self,
        conversation_service: ConversationService,
        user_id: str,
    ) -> None:
        # Arrange
        created = await conversation_service.create_conversation(CreateConversationRequest(user_id=user_id))

        # Act
        response = await conversation_service.chat(
            created.id, ConversationChatRequest(message="Who regulates discharges?")
        )
        history = await conversation_service.get_messages(created.id)

        # Assert
        assert response.conversation_id == created.id
        assert [c.document_id for c in response.citations] == ["it-dlgs-152-2006"]
        assert history.total == 2
        assert [m.role for m in history.messages] == ["user", "assistant"]
        assert history.messages[1].id == response.message_id
        assert history.messages[1].citations == response.citations

    @pytest.mark.asyncio
    async def test_first_exchange_should_set_title(
        self,
        conversation_service: ConversationService,
        user_id: str,
    ) -> None:
        # Arrange
        created = await conversation_service.create_conversation(CreateConversationRequest(user_id=user_id))
        message = "What are the discharge limits for urban wastewater in Lombardy today?"

        # Act
        await conversation_service.chat(created.id, ConversationChatRequest(message=message))
        await conversation_service.chat(created.id, ConversationChatRequest(message="And for industry?"))

        # Assert
        conversation = await conversation_service.get_conversation(created.id)
        assert conversation.title == message[:50] + "..."

    @pytest.mark.asyncio
    async def test_selected_laws_should_become_research_context(
        self,
        conversation_service: ConversationService,
        mock_llm_client: MagicMock,
        user_id: str,
    ) -> None:
        # Arrange
        created = await conversation_service.create_conversation(CreateConversationRequest(user_id=user_id))
        request = ConversationChatRequest(
            message="Summarise it",
            selected_law_ids=["eu-wfd-2000-60"],
        )

        # Act
        await conversation_service.chat(created.id, request)

        # Assert
        system_message = mock_llm_client.acomplete.await_args.args[0][0]
        assert "The user is researching the following laws: Water Framework Directive." in system_message.content
        assert "https://example.org/wfd.pdf" in system_message.content

    @pytest.mark.asyncio
    async def test_history_window_should_limit_sent_messages(
        self,
        conversation_service: ConversationService,
        mock_llm_client: MagicMock,
        user_id: str,
    ) -> None:
        # Arrange
        created = await conversation_service.create_conversation(CreateConversationRequest(user_id=user_id))
        for i in range(3):
            await conversation_service.chat(created.id, ConversationChatRequest(message=f"Q{i}"))

        # Act
        await conversation_service.chat(
            created.id, ConversationChatRequest(message="Last"), history_window=3
        )

        # Assert
        sent = mock_llm_client.acomplete.await_args.args[0]
        assert len(sent) == 1 + 3
        assert sent[-1].content == "Last"

    @pytest.mark.asyncio
    async def test_unknown_law_should_raise_before_storing(
        self,
        conversation_service: ConversationService,
        user_id: str,
    ) -> None:
        # Arrange
        created = await conversation_service.create_conversation(CreateConversationRequest(user_id=user_id))

        # Act & Assert
        with pytest.raises(LawNotFoundError):
            await conversation_service.chat(
                created.id,
                ConversationChatRequest(message="Hi", selected_law_ids=["nope"]),
            )
        history = await conversation_service.get_messages(created.id)
        assert history.total == 0

    @pytest.mark.asyncio
    async def test_gateway_failure_should_keep_user_message(
        self,
        conversation_service: ConversationService,
        mock_llm_client: MagicMock,
        user_id: str,
    ) -> None:
        # Arrange
        created = await conversation_service.create_conversation(CreateConversationRequest(user_id=user_id))
        mock_llm_client.acomplete.side_effect = LLMGatewayError("AI gateway error: 500", 500)

        # Act
        with pytest.raises(LLMGatewayError):
            await conversation_service.chat(created.id, ConversationChatRequest(message="Hi"))

        # Assert
        history = await conversation_service.get_messages(created.id)
        assert [m.role for m in history.messages] == ["user"]
