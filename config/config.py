import os
from pathlib import Path

from dotenv import load_dotenv

from utils.logger import get_logger

logger = get_logger(__name__)

# Language model
DEFAULT_LLM_BASE_URL = "https://integrate.api.nvidia.com/v1"
DEFAULT_LLM_MODEL = "nvidia/llama-3.3-nemotron-super-49b-v1.5"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_OUTPUT_TOKENS = 1024

# Context enrichment caps
FETCH_TIMEOUT_S = 10.0
MAX_FETCH_URLS = 4
MAX_PAGE_CHARS = 8000
MAX_PAGE_BYTES = 1_000_000
HISTORY_WINDOW = 10
MAX_SYSTEM_PROMPT_CHARS = 40000

DEFAULT_USER_AGENT = "CampusAssistant/1.0 (+campus-assistant; page fetch)"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


def _env_int(name: str, default: int) -> int:
    return int(_env_float(name, default))


class Config:
    """Configuration management for the campus assistant."""

    def __init__(self):
        """Initialize configuration with environment variables."""
        # Load environment variables from .env file if it exists
        env_path = Path(__file__).parent.parent / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)

        # Model service
        self.NVIDIA_API_KEY = os.getenv("NVIDIA_API_KEY")
        self.LLM_BASE_URL = os.getenv("LLM_BASE_URL", DEFAULT_LLM_BASE_URL)
        self.LLM_MODEL = os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL)
        self.LLM_TEMPERATURE = _env_float("LLM_TEMPERATURE", DEFAULT_TEMPERATURE)
        self.LLM_MAX_TOKENS = _env_int("LLM_MAX_TOKENS", DEFAULT_MAX_OUTPUT_TOKENS)

        # Page fetching and prompt budget
        self.FETCH_TIMEOUT_S = _env_float("FETCH_TIMEOUT_S", FETCH_TIMEOUT_S)
        self.MAX_FETCH_URLS = _env_int("MAX_FETCH_URLS", MAX_FETCH_URLS)
        self.MAX_PAGE_CHARS = _env_int("MAX_PAGE_CHARS", MAX_PAGE_CHARS)
        self.MAX_PAGE_BYTES = _env_int("MAX_PAGE_BYTES", MAX_PAGE_BYTES)
        self.HISTORY_WINDOW = _env_int("HISTORY_WINDOW", HISTORY_WINDOW)
        self.MAX_SYSTEM_PROMPT_CHARS = _env_int("MAX_SYSTEM_PROMPT_CHARS", MAX_SYSTEM_PROMPT_CHARS)
        self.FETCH_USER_AGENT = os.getenv("FETCH_USER_AGENT", DEFAULT_USER_AGENT)

        # HTTP
        origins = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "").split(",") if o.strip()]
        self.ALLOWED_ORIGINS = origins or ["*"]

    def validate(self) -> bool:
        """
        Validate that the model-service credential is present.

        Returns:
            bool: True if configuration is valid, False otherwise
        """
        if not self.NVIDIA_API_KEY:
            logger.error("NVIDIA_API_KEY is not set. Chat completions will fail until it is configured.")
            return False
        return True

    def get_model_info(self) -> str:
        """Human-readable description of the configured model."""
        return f"{self.LLM_MODEL} via {self.LLM_BASE_URL}"
