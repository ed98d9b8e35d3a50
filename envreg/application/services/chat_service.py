"""
Chat service for law Q&A with citation extraction.

Builds the system message from the compliance assistant prompt and the
user's selected laws, calls the LLM gateway, and attaches the citations
found in the answer.

Dependencies: langchain_core, envreg.core, envreg.boundary.llm
System role: Chat completion orchestration layer
"""

import logging
from collections.abc import Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from envreg.boundary.llm import LLMGatewayClient
from envreg.core.citation_extractor import CitationExtractor
from envreg.core.prompts import (
    CHAT_FALLBACK_ANSWER,
    CHAT_PROMPT,
    build_chat_system_message,
)
from envreg.models.chat import ChatRequest, ChatResponse, ChatTurn
from envreg.models.law import SelectedLaw

logger = logging.getLogger(__name__)


def to_langchain_messages(turns: Sequence[ChatTurn]) -> list[BaseMessage]:
    """
    Convert API chat turns to LangChain messages.

    Args:
        turns: User and assistant turns in chronological order

    Returns:
        list[BaseMessage]: HumanMessage / AIMessage list
    """
    return [
        HumanMessage(content=turn.content) if turn.role == "user"
        else AIMessage(content=turn.content)
        for turn in turns
    ]


class ChatService:
    """
    Stateless chat completion service.

    Used directly by the chat endpoint and by ConversationService for
    persisted conversations.
    """

    def __init__(
        self,
        llm_client: LLMGatewayClient,
        extractor: CitationExtractor,
    ) -> None:
        """
        Initialize chat service.

        Args:
            llm_client: Gateway client for completions
            extractor: Citation extractor applied to every answer
        """
        self.llm_client = llm_client
        self.extractor = extractor

    async def complete(self, request: ChatRequest) -> ChatResponse:
        """
        Answer the last user turn of a stateless chat request.

        Args:
            request: Conversation so far plus optional selected laws and context

        Returns:
            ChatResponse: Answer text and extracted citations

        Raises:
            LLMGatewayError: If the gateway call fails
        """
        return await self.answer(
            turns=request.messages,
            selected_laws=request.selected_laws,
            system_context=request.system_context,
        )

    async def answer(
        self,
        turns: Sequence[ChatTurn],
        selected_laws: Sequence[SelectedLaw] = (),
        system_context: str | None = None,
    ) -> ChatResponse:
        """
        Run one completion over the given history.

        Flow:
        1. Build system message (base prompt + selected laws + extra context)
        2. Call the LLM gateway with system message and history
        3. Substitute the fallback apology for empty output
        4. Extract citations from the final text

        Args:
            turns: Chat history ending with the user's question
            selected_laws: Laws the user picked as primary sources
            system_context: Optional extra system instructions

        Returns:
            ChatResponse: Answer text and citations
        """
        system_message = build_chat_system_message(selected_laws, system_context)
        messages = CHAT_PROMPT.format_messages(
            system_message=system_message,
            history=to_langchain_messages(turns),
        )

        logger.info(
            "Chat completion requested",
            extra={
                "turn_count": len(turns),
                "selected_law_count": len(selected_laws),
                "model": self.llm_client.model_name,
            },
        )

        content = await self.llm_client.acomplete(messages)
        if not content:
            logger.warning("Model returned empty answer, using fallback")
            content = CHAT_FALLBACK_ANSWER

        citations = self.extractor.extract(content)
        return ChatResponse(content=content, citations=citations)
