"""
Exception hierarchy for the environmental regulation assistant.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class EnvRegException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(EnvRegException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(EnvRegException):
    """Base class for missing resources."""


class ConversationNotFoundError(NotFoundError):
    """Raised when a conversation cannot be found."""

    def __init__(self, conversation_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["conversation_id"] = conversation_id
        super().__init__(f"Conversation not found: {conversation_id}", details)


class LawNotFoundError(NotFoundError):
    """Raised when a law id is not in the catalog."""

    def __init__(self, law_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["law_id"] = law_id
        super().__init__(f"Law not found: {law_id}", details)


class ReportNotFoundError(NotFoundError):
    """Raised when a compliance report cannot be found."""

    def __init__(self, report_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["report_id"] = report_id
        super().__init__(f"Compliance report not found: {report_id}", details)


class LawCatalogError(EnvRegException):
    """Raised when the norms file cannot be read or parsed."""


class LLMGatewayError(EnvRegException):
    """Raised when the hosted LLM gateway call fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize gateway error.

        Args:
            message: Error message
            status_code: HTTP status returned by the gateway, if any
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class LLMConfigurationError(LLMGatewayError):
    """Raised when the gateway credentials are missing."""


class LLMRateLimitError(LLMGatewayError):
    """Raised when the gateway answers 429."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Rate limits exceeded, please try again later.", 429, details)


class LLMPaymentRequiredError(LLMGatewayError):
    """Raised when the gateway answers 402."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Payment required, please add funds to your workspace.", 402, details)


class ReportParsingError(EnvRegException):
    """Raised when a model answer does not contain a usable compliance report."""
