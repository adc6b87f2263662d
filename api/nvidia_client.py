import time

import httpx
import openai

from config.config import DEFAULT_LLM_BASE_URL, DEFAULT_LLM_MODEL, DEFAULT_MAX_OUTPUT_TOKENS, DEFAULT_TEMPERATURE
from models.completion import CompletionResponse, NormalizedError, TokenUsage
from utils.logger import get_logger

from .base_client import BaseAIClient

logger = get_logger(__name__)


class NvidiaClient(BaseAIClient):
    """
    NVIDIA-hosted chat completions returning CompletionResponse.

    Uses the OpenAI SDK with a custom base URL since the NVIDIA API is
    OpenAI-compatible. The SDK client is created on first use so a missing
    credential surfaces as a per-request ``config`` error, not at startup.
    The SDK retry loop is disabled: each call makes exactly one request.
    """

    provider_name = "nvidia"

    def __init__(
        self,
        api_key: str | None,
        model_name: str = DEFAULT_LLM_MODEL,
        base_url: str = DEFAULT_LLM_BASE_URL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
        http_client: httpx.Client | None = None,
        **kwargs,
    ):
        super().__init__(api_key, model_name=model_name, **kwargs)
        self.model_name = model_name
        self.base_url = base_url
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.http_client = http_client
        self._client = None

    @property
    def client(self) -> openai.OpenAI:
        if self._client is None:
            self._client = openai.OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                max_retries=0,
                http_client=self.http_client,
            )
        return self._client

    def get_completion(self, messages: list[dict[str, str]], **kwargs) -> CompletionResponse:
        """
        Get a completion from the NVIDIA API.

        Args:
            messages: System/history/user message dicts
            **kwargs:
                - model: Override the default model for this call
                - temperature: Controls randomness (default 0.7)
                - max_tokens: Response token ceiling (default 1024)

        Returns:
            CompletionResponse: text on success, NormalizedError otherwise

        IMPORTANT: Never raises exceptions - returns CompletionResponse with error instead
        """
        request_id = self._generate_request_id()
        start_time = time.time()

        model = kwargs.get("model", self.model_name)
        temperature = kwargs.get("temperature", self.temperature)
        max_tokens = kwargs.get("max_tokens", self.max_tokens)

        if not self.api_key:
            error = NormalizedError(
                code="config",
                message="NVIDIA_API_KEY is not configured",
                provider=self.provider_name,
            )
            logger.error(
                "Chat completion skipped: missing credential",
                extra={"extra_fields": {"request_id": request_id, "model": model}},
            )
            return self._create_error_response(request_id, error, self._measure_latency(start_time), model)

        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
            latency_ms = self._measure_latency(start_time)

            choices = getattr(response, "choices", None) or []
            message = choices[0].message if choices else None
            if message is None or message.content is None:
                error = NormalizedError(
                    code="invalid_response",
                    message="NVIDIA API returned an invalid response",
                    provider=self.provider_name,
                    details={"choices": len(choices)},
                )
                logger.error(
                    "Chat completion returned no message",
                    extra={"extra_fields": {"request_id": request_id, "model": model}},
                )
                return self._create_error_response(request_id, error, latency_ms, model)

            usage = getattr(response, "usage", None)
            token_usage = TokenUsage(
                prompt_tokens=getattr(usage, "prompt_tokens", 0) or 0,
                completion_tokens=getattr(usage, "completion_tokens", 0) or 0,
                total_tokens=getattr(usage, "total_tokens", 0) or 0,
            )

            logger.info(
                "Chat completion successful",
                extra={
                    "extra_fields": {
                        "request_id": request_id,
                        "model": model,
                        "latency_ms": latency_ms,
                        "tokens": token_usage.total_tokens,
                        "messages": len(messages),
                    }
                },
            )

            return CompletionResponse(
                request_id=request_id,
                text=message.content,
                provider=self.provider_name,
                model=model,
                latency_ms=latency_ms,
                token_usage=token_usage,
                finish_reason=self._normalize_finish_reason(getattr(choices[0], "finish_reason", None)),
            )

        except Exception as e:
            latency_ms = self._measure_latency(start_time)
            error = self._normalize_error(e)

            logger.error(
                f"Chat completion failed: {error.code}",
                extra={
                    "extra_fields": {
                        "request_id": request_id,
                        "model": model,
                        "error_code": error.code,
                        "error_message": error.message,
                        "retryable": error.retryable,
                    }
                },
            )

            return self._create_error_response(request_id, error, latency_ms, model)
