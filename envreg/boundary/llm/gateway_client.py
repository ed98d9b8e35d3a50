"""
LLM gateway client.

Thin async wrapper over LangChain's ChatOpenAI pointed at an
OpenAI-compatible completion gateway. Translates gateway HTTP failures into
the domain exception hierarchy.

Dependencies: langchain_openai, langchain_core, openai, envreg.configs
System role: Boundary adapter for model completions
"""

import logging
import time
from collections.abc import Sequence

import openai
from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI

from envreg.configs.llm_gateway import LLMGatewaySettings
from envreg.core.exceptions import (
    LLMConfigurationError,
    LLMGatewayError,
    LLMPaymentRequiredError,
    LLMRateLimitError,
)

logger = logging.getLogger(__name__)


class LLMGatewayClient:
    """
    Completion client for the hosted LLM gateway.

    The underlying chat model is created on first use so the application can
    start without credentials; the missing key is reported per request.
    """

    def __init__(self, settings: LLMGatewaySettings, model: ChatOpenAI | None = None) -> None:
        """
        Initialize gateway client.

        Args:
            settings: Gateway URL, key, model and timeouts
            model: Optional pre-built chat model (used by tests)
        """
        self._settings = settings
        self._model = model

    @property
    def model_name(self) -> str:
        return self._settings.model

    def _get_model(self) -> ChatOpenAI:
        if self._model is None:
            if not self._settings.api_key:
                raise LLMConfigurationError("LLM_API_KEY is not configured")
            self._model = ChatOpenAI(
                model=self._settings.model,
                api_key=self._settings.api_key,
                base_url=self._settings.base_url,
                temperature=self._settings.temperature,
                timeout=self._settings.timeout_seconds,
                max_retries=self._settings.max_retries,
            )
        return self._model

    async def acomplete(self, messages: Sequence[BaseMessage]) -> str:
        """
        Send messages to the gateway and return the answer text.

        Args:
            messages: System, human and AI messages in order

        Returns:
            str: Text content of the first choice ("" when the model returned none)

        Raises:
            LLMConfigurationError: If no API key is configured
            LLMRateLimitError: On HTTP 429
            LLMPaymentRequiredError: On HTTP 402
            LLMGatewayError: On any other gateway failure
        """
        model = self._get_model()
        start_time = time.time()

        try:
            result = await model.ainvoke(list(messages))
        except openai.APIStatusError as e:
            logger.error(
                "AI gateway error",
                extra={"status_code": e.status_code, "error_msg": str(e)},
            )
            if e.status_code == 429:
                raise LLMRateLimitError() from e
            if e.status_code == 402:
                raise LLMPaymentRequiredError() from e
            raise LLMGatewayError(f"AI gateway error: {e.status_code}", e.status_code) from e
        except openai.APIError as e:
            logger.error("AI gateway unreachable", extra={"error_msg": str(e)})
            raise LLMGatewayError(f"AI gateway error: {type(e).__name__}") from e

        logger.info(
            "AI gateway call completed",
            extra={
                "model": self._settings.model,
                "message_count": len(messages),
                "latency_ms": round((time.time() - start_time) * 1000, 2),
            },
        )
        return _text_content(result.content)


def _text_content(content: str | list) -> str:
    """Flatten message content; multimodal lists keep only their text parts."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)
