"""FastAPI dependencies: shared config, record store, model client and assembler."""

from api.base_client import BaseAIClient
from config.config import Config
from server.storage import InMemoryRecordStore, RecordStore
from tools.web import ContextAssembler, create_context_assembler_from_env


def get_config() -> Config:
    """Dependency to get the process configuration (singleton pattern)."""
    if not hasattr(get_config, "_instance"):
        get_config._instance = Config()
    return get_config._instance


def get_store() -> RecordStore:
    """Dependency to get the record store, created once per process."""
    if not hasattr(get_store, "_instance"):
        get_store._instance = InMemoryRecordStore()
    return get_store._instance


def get_llm_client() -> BaseAIClient:
    """Dependency to get the chat-completion client (singleton pattern)."""
    from api.nvidia_client import NvidiaClient

    if not hasattr(get_llm_client, "_instance"):
        config = get_config()
        get_llm_client._instance = NvidiaClient(
            api_key=config.NVIDIA_API_KEY,
            model_name=config.LLM_MODEL,
            base_url=config.LLM_BASE_URL,
            temperature=config.LLM_TEMPERATURE,
            max_tokens=config.LLM_MAX_TOKENS,
        )
    return get_llm_client._instance


def get_context_assembler() -> ContextAssembler:
    if not hasattr(get_context_assembler, "_instance"):
        get_context_assembler._instance = create_context_assembler_from_env(get_config())
    return get_context_assembler._instance


def reset_dependencies() -> None:
    """Drop cached singletons (used at shutdown and by tests)."""
    for provider in (get_config, get_store, get_llm_client, get_context_assembler):
        if hasattr(provider, "_instance"):
            delattr(provider, "_instance")
