from types import SimpleNamespace

import httpx
import openai

from api.nvidia_client import NvidiaClient

MESSAGES = [
    {"role": "system", "content": "You are a helpful campus AI assistant."},
    {"role": "user", "content": "Hi"},
]


class FakeCompletions:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.exc:
            raise self.exc
        return self.response


def _client_with(completions: FakeCompletions) -> NvidiaClient:
    client = NvidiaClient(api_key="test-key", model_name="test-model")
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client


def _sdk_response(content="Hello there", finish_reason="stop"):
    return SimpleNamespace(
        choices=[
            SimpleNamespace(message=SimpleNamespace(content=content), finish_reason=finish_reason)
        ],
        usage=SimpleNamespace(prompt_tokens=12, completion_tokens=3, total_tokens=15),
    )


def test_missing_key_returns_config_error():
    response = NvidiaClient(api_key=None).get_completion(MESSAGES)

    assert response.is_error
    assert response.error.code == "config"
    assert response.text == ""
    assert response.provider == "nvidia"


def test_success_passes_generation_settings():
    completions = FakeCompletions(response=_sdk_response())
    response = _client_with(completions).get_completion(MESSAGES)

    assert response.is_success
    assert response.text == "Hello there"
    assert response.finish_reason == "stop"
    assert response.token_usage.total_tokens == 15
    assert completions.kwargs == {
        "model": "test-model",
        "messages": MESSAGES,
        "temperature": 0.7,
        "max_tokens": 1024,
    }


def test_empty_choices_is_invalid_response():
    completions = FakeCompletions(response=SimpleNamespace(choices=[], usage=None))
    response = _client_with(completions).get_completion(MESSAGES)

    assert response.error.code == "invalid_response"


def test_missing_content_is_invalid_response():
    completions = FakeCompletions(response=_sdk_response(content=None))
    response = _client_with(completions).get_completion(MESSAGES)

    assert response.error.code == "invalid_response"


def test_connection_error_is_normalized():
    request = httpx.Request("POST", "https://integrate.api.nvidia.com/v1/chat/completions")
    completions = FakeCompletions(exc=openai.APIConnectionError(request=request))
    response = _client_with(completions).get_completion(MESSAGES)

    assert response.error.code == "provider_error"
    assert response.error.retryable is True
    assert response.error.details["error_type"] == "APIConnectionError"


def test_unexpected_exception_never_raises():
    completions = FakeCompletions(exc=RuntimeError("boom"))
    response = _client_with(completions).get_completion(MESSAGES)

    assert response.error.code == "unknown"
    assert "boom" in response.error.message


def _transport_client(handler) -> tuple[NvidiaClient, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def _handler(request: httpx.Request):
        requests.append(request)
        return handler(request)

    client = NvidiaClient(
        api_key="test-key",
        model_name="test-model",
        http_client=httpx.Client(transport=httpx.MockTransport(_handler)),
    )
    return client, requests


def test_sdk_round_trip_over_http():
    body = {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 0,
        "model": "test-model",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": "Hi!"}, "finish_reason": "stop"}
        ],
        "usage": {"prompt_tokens": 3, "completion_tokens": 1, "total_tokens": 4},
    }
    client, requests = _transport_client(lambda request: httpx.Response(200, json=body))

    response = client.get_completion(MESSAGES)

    assert response.text == "Hi!"
    assert response.token_usage.total_tokens == 4
    assert len(requests) == 1
    assert requests[0].url.path == "/v1/chat/completions"
    assert requests[0].headers["Authorization"] == "Bearer test-key"


def test_server_error_is_not_retried():
    client, requests = _transport_client(
        lambda request: httpx.Response(500, json={"error": {"message": "upstream failed"}})
    )

    response = client.get_completion(MESSAGES)

    assert len(requests) == 1
    assert response.error.code == "provider_error"
    assert response.error.details["status_code"] == 500


def test_rate_limit_is_not_retried():
    client, requests = _transport_client(
        lambda request: httpx.Response(429, json={"error": {"message": "slow down"}})
    )

    response = client.get_completion(MESSAGES)

    assert len(requests) == 1
    assert response.error.code == "rate_limit"


def test_connection_failure_is_not_retried():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, requests = _transport_client(handler)

    response = client.get_completion(MESSAGES)

    assert len(requests) == 1
    assert response.error.code == "provider_error"
