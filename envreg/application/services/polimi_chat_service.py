"""
Degree-scoped chat service for Politecnico di Milano courses.

Dependencies: envreg.core, envreg.boundary.llm
System role: Polimi assistant orchestration layer
"""

import logging

from envreg.application.services.chat_service import to_langchain_messages
from envreg.boundary.llm import LLMGatewayClient
from envreg.core.citation_extractor import CitationExtractor
from envreg.core.prompts import (
    CHAT_PROMPT,
    POLIMI_FALLBACK_ANSWER,
    build_polimi_system_prompt,
)
from envreg.models.chat import ChatResponse
from envreg.models.polimi import PolimiChatRequest

logger = logging.getLogger(__name__)


class PolimiChatService:
    """Answers regulation questions in Italian within a degree program's scope."""

    def __init__(
        self,
        llm_client: LLMGatewayClient,
        extractor: CitationExtractor,
    ) -> None:
        self.llm_client = llm_client
        self.extractor = extractor

    async def complete(self, request: PolimiChatRequest) -> ChatResponse:
        """
        Answer the last turn with the degree-specific system prompt.

        Args:
            request: Chat history, course name and optional extra instructions

        Returns:
            ChatResponse: Answer text (Italian fallback when empty) and citations

        Raises:
            LLMGatewayError: If the gateway call fails
        """
        system_prompt = build_polimi_system_prompt(
            request.course_name,
            request.system_prompt,
        )
        messages = CHAT_PROMPT.format_messages(
            system_message=system_prompt,
            history=to_langchain_messages(request.messages),
        )

        logger.info(
            "Polimi chat requested",
            extra={"course_name": request.course_name, "turn_count": len(request.messages)},
        )

        content = await self.llm_client.acomplete(messages) or POLIMI_FALLBACK_ANSWER
        return ChatResponse(content=content, citations=self.extractor.extract(content))
