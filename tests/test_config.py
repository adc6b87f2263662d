import pytest

from config.config import Config

TUNABLES = (
    "LLM_BASE_URL",
    "LLM_TEMPERATURE",
    "LLM_MAX_TOKENS",
    "FETCH_TIMEOUT_S",
    "MAX_FETCH_URLS",
    "MAX_PAGE_CHARS",
    "HISTORY_WINDOW",
    "MAX_SYSTEM_PROMPT_CHARS",
    "ALLOWED_ORIGINS",
)


@pytest.fixture
def clean_env(monkeypatch, mock_env):
    for name in TUNABLES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    config = Config()

    assert config.NVIDIA_API_KEY == "test-api-key"
    assert config.LLM_MODEL == "test-model"
    assert config.LLM_BASE_URL == "https://integrate.api.nvidia.com/v1"
    assert config.LLM_TEMPERATURE == 0.7
    assert config.LLM_MAX_TOKENS == 1024
    assert config.FETCH_TIMEOUT_S == 10.0
    assert config.MAX_FETCH_URLS == 4
    assert config.HISTORY_WINDOW == 10
    assert config.ALLOWED_ORIGINS == ["*"]
    assert config.validate() is True


def test_overrides(clean_env):
    clean_env.setenv("MAX_FETCH_URLS", "2")
    clean_env.setenv("FETCH_TIMEOUT_S", "3.5")
    clean_env.setenv("ALLOWED_ORIGINS", "http://localhost:5173, https://campus.example")

    config = Config()

    assert config.MAX_FETCH_URLS == 2
    assert config.FETCH_TIMEOUT_S == 3.5
    assert config.ALLOWED_ORIGINS == ["http://localhost:5173", "https://campus.example"]


def test_non_numeric_value_falls_back_to_default(clean_env):
    clean_env.setenv("HISTORY_WINDOW", "lots")
    assert Config().HISTORY_WINDOW == 10


def test_missing_key_fails_validation(clean_env):
    clean_env.delenv("NVIDIA_API_KEY")
    config = Config()
    assert config.NVIDIA_API_KEY is None
    assert config.validate() is False


def test_assembler_factory_reads_config(clean_env):
    from tools.web import create_context_assembler_from_env

    clean_env.setenv("MAX_FETCH_URLS", "3")
    clean_env.setenv("MAX_PAGE_CHARS", "500")

    assembler = create_context_assembler_from_env(Config())

    assert assembler.max_fetch_urls == 3
    assert assembler.history_window == 10
    assert assembler.fetcher.max_chars == 500
    assert assembler.fetcher.timeout_s == 10.0
