"""
Polimi degree assistant schemas.

Dependencies: pydantic
System role: Degree-scoped chat API contracts
"""

from pydantic import Field

from envreg.models.chat import ChatTurn
from envreg.models.common import CamelModel


class PolimiChatRequest(CamelModel):
    """Chat request scoped to a Politecnico di Milano degree program."""

    messages: list[ChatTurn] = Field(min_length=1)
    system_prompt: str | None = Field(default=None, description="Additional course instructions")
    course_name: str = Field(default="", description="Degree program name")
