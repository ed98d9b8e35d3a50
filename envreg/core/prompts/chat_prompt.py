"""
Law chat system prompt.

Defines the environmental compliance assistant prompt and the selected-laws
context appended to it.

Dependencies: langchain_core.prompts
System role: Prompt template for the law chat
"""

from collections.abc import Sequence

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from envreg.models.law import Law, SelectedLaw

SYSTEM_PROMPT = """You are an expert environmental compliance assistant for Polimi Environmental Engineers. Your role is to help engineers understand and navigate European, Italian National, and Lombardy Regional environmental regulations.

IMPORTANT GUIDELINES:
1. Always provide factual, accurate information about environmental regulations
2. When answering questions, cite specific regulations, directives, or laws when possible
3. Clearly distinguish between EU directives, Italian national laws (D.Lgs), and regional regulations
4. If you're not certain about a specific regulation, acknowledge the limitation
5. Focus on practical compliance guidance for environmental engineering projects
6. Cover areas including: sewage/wastewater, air quality, waste management, water resources, noise pollution, soil contamination, and energy/emissions

Be thorough but concise. Focus on actionable compliance information."""

CHAT_FALLBACK_ANSWER = "I apologize, but I couldn't generate a response. Please try again."

# System text is passed as a variable so braces inside law titles are never parsed.
CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{system_message}"),
    MessagesPlaceholder("history"),
])


def _format_selected_law(law: SelectedLaw) -> str:
    return (
        f"- {law.short_name} ({law.title})\n"
        f"  PDF: {law.pdf_url}\n"
        f"  Jurisdiction: {law.jurisdiction} | Category: {law.category}"
    )


def build_chat_system_message(
    selected_laws: Sequence[SelectedLaw] = (),
    system_context: str | None = None,
) -> str:
    """
    Build the system message for a law chat turn.

    Args:
        selected_laws: Laws the user picked as primary sources
        system_context: Optional extra instructions appended last

    Returns:
        str: Complete system message
    """
    system_message = SYSTEM_PROMPT

    if selected_laws:
        law_context = "\n\n".join(_format_selected_law(law) for law in selected_laws)
        system_message += (
            "\n\n=== SELECTED LAWS FOR THIS CONVERSATION ===\n"
            "The user has selected the following laws for reference. "
            "Use these as your primary sources:\n\n"
            f"{law_context}\n\n"
            "When answering questions, prioritize information from these selected laws "
            "and cite them specifically."
        )

    if system_context:
        system_message += f"\n\n{system_context}"

    return system_message


def build_research_context(laws: Sequence[Law]) -> str:
    """
    Describe the laws a user is researching, sent as extra system context.

    Returns "" when no laws are selected.
    """
    if not laws:
        return ""
    titles = ", ".join(law.title for law in laws)
    urls = "\n".join(f"{law.short_name}: {law.pdf_url}" for law in laws)
    return (
        f"The user is researching the following laws: {titles}. \n"
        "Use these PDFs as your primary source of truth:\n"
        f"{urls}\n\n"
        "When answering, always cite the specific law and article when applicable."
    )
