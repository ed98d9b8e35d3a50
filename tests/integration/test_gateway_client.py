"""
Test suite for LLMGatewayClient.

The LangChain chat model is replaced by a mock; openai exceptions are built
from httpx responses the way the SDK raises them.

System role: Verification of gateway error translation
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest
from langchain_core.messages import AIMessage, HumanMessage

from envreg.boundary.llm import LLMGatewayClient
from envreg.configs.llm_gateway import LLMGatewaySettings
from envreg.core.exceptions import (
    LLMConfigurationError,
    LLMGatewayError,
    LLMPaymentRequiredError,
    LLMRateLimitError,
)

GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"


def _status_error(status_code: int) -> openai.APIStatusError:
    request = httpx.Request("POST", GATEWAY_URL)
    response = httpx.Response(status_code, request=request)
    return openai.APIStatusError(f"Error code: {status_code}", response=response, body=None)


@pytest.fixture
def settings() -> LLMGatewaySettings:
    """Gateway settings with a dummy key."""
    return LLMGatewaySettings(api_key="test-key")


@pytest.fixture
def mock_model() -> MagicMock:
    """Mock ChatOpenAI returning a plain answer."""
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=AIMessage(content="Answer"))
    return model


class TestLLMGatewayClientSuccess:
    """Successful completions."""

    @pytest.mark.asyncio
    async def test_acomplete_should_return_text(
        self,
        settings: LLMGatewaySettings,
        mock_model: MagicMock,
    ) -> None:
        # Arrange
        client = LLMGatewayClient(settings, model=mock_model)
        messages = [HumanMessage(content="Hi")]

        # Act
        answer = await client.acomplete(messages)

        # Assert
        assert answer == "Answer"
        mock_model.ainvoke.assert_awaited_once_with(messages)

    @pytest.mark.asyncio
    async def test_list_content_should_keep_text_parts(
        self,
        settings: LLMGatewaySettings,
        mock_model: MagicMock,
    ) -> None:
        mock_model.ainvoke.return_value = AIMessage(
            content=[{"type": "text", "text": "Part one. "}, {"type": "text", "text": "Part two."}]
        )
        client = LLMGatewayClient(settings, model=mock_model)

        answer = await client.acomplete([HumanMessage(content="Hi")])

        assert answer == "Part one. Part two."

    def test_model_name_should_come_from_settings(self, settings: LLMGatewaySettings) -> None:
        assert LLMGatewayClient(settings).model_name == "google/gemini-2.5-flash"


class TestLLMGatewayClientErrors:
    """Error translation."""

    @pytest.mark.asyncio
    async def test_missing_api_key_should_raise_configuration_error(self) -> None:
        client = LLMGatewayClient(LLMGatewaySettings(api_key=None))

        with pytest.raises(LLMConfigurationError, match="LLM_API_KEY"):
            await client.acomplete([HumanMessage(content="Hi")])

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code, expected",
        [
            (429, LLMRateLimitError),
            (402, LLMPaymentRequiredError),
        ],
    )
    async def test_quota_statuses_should_map_to_specific_errors(
        self,
        settings: LLMGatewaySettings,
        mock_model: MagicMock,
        status_code: int,
        expected: type[LLMGatewayError],
    ) -> None:
        # Arrange
        mock_model.ainvoke.side_effect = _status_error(status_code)
        client = LLMGatewayClient(settings, model=mock_model)

        # Act & Assert
        with pytest.raises(expected) as exc_info:
            await client.acomplete([HumanMessage(content="Hi")])
        assert exc_info.value.status_code == status_code

    @pytest.mark.asyncio
    async def test_other_status_should_map_to_gateway_error(
        self,
        settings: LLMGatewaySettings,
        mock_model: MagicMock,
    ) -> None:
        mock_model.ainvoke.side_effect = _status_error(503)
        client = LLMGatewayClient(settings, model=mock_model)

        with pytest.raises(LLMGatewayError, match="AI gateway error: 503") as exc_info:
            await client.acomplete([HumanMessage(content="Hi")])
        assert exc_info.type is LLMGatewayError
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_connection_error_should_map_to_gateway_error(
        self,
        settings: LLMGatewaySettings,
        mock_model: MagicMock,
    ) -> None:
        mock_model.ainvoke.side_effect = openai.APIConnectionError(
            request=httpx.Request("POST", GATEWAY_URL)
        )
        client = LLMGatewayClient(settings, model=mock_model)

        with pytest.raises(LLMGatewayError) as exc_info:
            await client.acomplete([HumanMessage(content="Hi")])
        assert exc_info.value.status_code is None
