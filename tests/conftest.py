import httpx
import pytest

from models.completion import CompletionResponse, NormalizedError, TokenUsage
from server.storage import InMemoryRecordStore
from tools.web import ContextAssembler, PageFetcher

PAGE_HTML = """
<html>
  <head><title>Events</title><style>body { color: red; }</style></head>
  <body>
    <nav>Home | About | Contact</nav>
    <script>var tracking = true;</script>
    <main><h1>Homecoming Week</h1>
      <p>Parade on Saturday.</p></main>
    <footer>Copyright 2025</footer>
  </body>
</html>
"""


class FakeLLMClient:
    """Records the messages it receives; answers with a canned reply or error."""

    def __init__(self, reply: str = "Here is what I found.", error_code: str | None = None):
        self.reply = reply
        self.error_code = error_code
        self.calls: list[list[dict[str, str]]] = []

    def get_completion(self, messages, **kwargs) -> CompletionResponse:
        self.calls.append(messages)
        if self.error_code:
            return CompletionResponse(
                request_id="req_fake",
                text="",
                provider="fake",
                model="fake-model",
                latency_ms=1,
                finish_reason="error",
                error=NormalizedError(
                    code=self.error_code,
                    message="NVIDIA_API_KEY is not configured",
                    provider="fake",
                ),
            )
        return CompletionResponse(
            request_id="req_fake",
            text=self.reply,
            provider="fake",
            model="fake-model",
            latency_ms=1,
            token_usage=TokenUsage(prompt_tokens=10, completion_tokens=5),
            finish_reason="stop",
        )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every requested URL."""

    def __init__(self, handler=None):
        self.requested: list[str] = []
        inner = handler or (lambda request: httpx.Response(200, text=PAGE_HTML))

        def _handler(request: httpx.Request):
            self.requested.append(str(request.url))
            return inner(request)

        super().__init__(_handler)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def fetcher(transport):
    return PageFetcher(timeout_s=2.0, max_chars=8000, transport=transport)


@pytest.fixture
def assembler(fetcher):
    return ContextAssembler(fetcher=fetcher)


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def mock_env(monkeypatch):
    """Environment for tests that build Config; never reads a real .env key."""
    env_vars = {
        "NVIDIA_API_KEY": "test-api-key",
        "LLM_MODEL": "test-model",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars
