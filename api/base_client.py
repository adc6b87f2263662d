import time
import uuid
from abc import ABC, abstractmethod

import openai

from models.completion import CompletionResponse, FinishReason, NormalizedError


class BaseAIClient(ABC):
    """
    Abstract base class for chat-completion clients.

    Implementations MUST NOT raise from ``get_completion``: failures are
    returned as a CompletionResponse carrying a NormalizedError.
    """

    provider_name = "base"

    @abstractmethod
    def __init__(self, api_key: str | None, **kwargs):
        """
        Initialize the AI client.

        Args:
            api_key: API key for the AI service (may be None; calls then fail with a config error)
            **kwargs: Additional model-specific parameters
        """
        self.api_key = api_key
        self.model_name = kwargs.get("model_name")

    @abstractmethod
    def get_completion(self, messages: list[dict[str, str]], **kwargs) -> CompletionResponse:
        """
        Get a completion for a system/history/user message list.

        Args:
            messages: List of dicts with 'role' and 'content'
            **kwargs: temperature, max_tokens, model overrides

        Returns:
            CompletionResponse with text or error
        """

    def _generate_request_id(self) -> str:
        return f"req_{uuid.uuid4().hex[:16]}"

    def _measure_latency(self, start_time: float) -> int:
        return int((time.time() - start_time) * 1000)

    def _normalize_finish_reason(self, reason: str | None) -> FinishReason:
        if reason is None:
            return None
        mapping = {"stop": "stop", "length": "length", "content_filter": "content_filter"}
        return mapping.get(reason, reason)

    def _normalize_error(self, exc: Exception) -> NormalizedError:
        """Map SDK exceptions onto the NormalizedError taxonomy."""
        if isinstance(exc, openai.APITimeoutError):
            code, retryable = "timeout", True
        elif isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
            code, retryable = "auth", False
        elif isinstance(exc, openai.RateLimitError):
            code, retryable = "rate_limit", True
        elif isinstance(exc, (openai.BadRequestError, openai.UnprocessableEntityError)):
            code, retryable = "bad_request", False
        elif isinstance(exc, (openai.APIStatusError, openai.APIConnectionError)):
            code, retryable = "provider_error", True
        else:
            code, retryable = "unknown", False

        details = {"error_type": type(exc).__name__}
        status_code = getattr(exc, "status_code", None)
        if status_code is not None:
            details["status_code"] = status_code

        return NormalizedError(
            code=code,
            message=f"{self.provider_name} API error: {exc!s}",
            provider=self.provider_name,
            retryable=retryable,
            details=details,
        )

    def _create_error_response(
        self, request_id: str, error: NormalizedError, latency_ms: int, model: str | None = None
    ) -> CompletionResponse:
        return CompletionResponse(
            request_id=request_id,
            text="",
            provider=self.provider_name,
            model=model or self.model_name or "unknown",
            latency_ms=latency_ms,
            finish_reason="error",
            error=error,
        )
