"""Prompt templates for the chat, degree assistant and compliance flows."""

from envreg.core.prompts.chat_prompt import (
    CHAT_FALLBACK_ANSWER,
    CHAT_PROMPT,
    build_chat_system_message,
    build_research_context,
)
from envreg.core.prompts.compliance_prompt import (
    COMPLIANCE_PROMPT,
    build_compliance_prompt_values,
    build_filter_context,
)
from envreg.core.prompts.polimi_prompt import (
    POLIMI_FALLBACK_ANSWER,
    build_polimi_system_prompt,
)

__all__ = [
    "CHAT_FALLBACK_ANSWER",
    "CHAT_PROMPT",
    "COMPLIANCE_PROMPT",
    "POLIMI_FALLBACK_ANSWER",
    "build_chat_system_message",
    "build_compliance_prompt_values",
    "build_filter_context",
    "build_polimi_system_prompt",
    "build_research_context",
]
