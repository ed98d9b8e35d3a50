"""
API error handling utilities.

Provides decorators that translate domain exceptions into HTTPExceptions
with consistent status codes and logging across all endpoints.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from envreg.core.exceptions import (
    EnvRegException,
    LLMGatewayError,
    LLMPaymentRequiredError,
    LLMRateLimitError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class GatewayErrorMessages:
    """User-facing texts for gateway quota errors."""

    rate_limited: str
    payment_required: str
    unexpected: str


ENGLISH_MESSAGES = GatewayErrorMessages(
    rate_limited="Rate limits exceeded, please try again later.",
    payment_required="Payment required, please add funds to your workspace.",
    unexpected="Unknown error",
)

ITALIAN_MESSAGES = GatewayErrorMessages(
    rate_limited="Limite di richieste superato. Riprova tra un momento.",
    payment_required="Quota di servizio esaurita. Riprova più tardi.",
    unexpected="Si è verificato un errore imprevisto",
)


def make_error_handler(messages: GatewayErrorMessages) -> Callable[[F], F]:
    """
    Build a route decorator mapping domain errors to HTTP responses.

    Mapping:
    - NotFoundError -> 404
    - ValidationError -> 400
    - LLMRateLimitError -> 429, LLMPaymentRequiredError -> 402 (localized text)
    - other LLMGatewayError / EnvRegException / unexpected -> 500
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except HTTPException:
                raise

            except NotFoundError as e:
                logger.warning("Resource not found", extra={"error": e.message, "details": e.details})
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

            except ValidationError as e:
                logger.warning("Invalid request", extra={"error": e.message, "details": e.details})
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

            except LLMRateLimitError:
                logger.warning("LLM gateway rate limit hit")
                raise HTTPException(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    detail=messages.rate_limited,
                )

            except LLMPaymentRequiredError:
                logger.warning("LLM gateway quota exhausted")
                raise HTTPException(
                    status_code=status.HTTP_402_PAYMENT_REQUIRED,
                    detail=messages.payment_required,
                )

            except LLMGatewayError as e:
                logger.error(
                    "LLM gateway failure",
                    extra={"error": e.message, "gateway_status": e.status_code},
                )
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=e.message,
                )

            except EnvRegException as e:
                logger.error("Request failed", extra={"error": e.message})
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=e.message,
                )

            except Exception as e:
                logger.exception("Unexpected failure", extra={"error": str(e)})
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=str(e) or messages.unexpected,
                )

        return wrapper  # type: ignore

    return decorator


handle_api_errors = make_error_handler(ENGLISH_MESSAGES)
handle_polimi_errors = make_error_handler(ITALIAN_MESSAGES)
