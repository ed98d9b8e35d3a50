"""Hosted LLM gateway client."""

from envreg.boundary.llm.gateway_client import LLMGatewayClient

__all__ = ["LLMGatewayClient"]
