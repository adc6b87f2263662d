"""Factory for creating the context assembler from environment configuration."""

from config.config import Config
from utils.logger import get_logger

from .context_assembler import ContextAssembler
from .page_fetcher import PageFetcher

logger = get_logger(__name__)


def create_context_assembler_from_env(config: Config | None = None) -> ContextAssembler:
    """
    Create a ContextAssembler wired to a PageFetcher.

    Environment variables (read through Config):
        FETCH_TIMEOUT_S: Per-page timeout in seconds (default: 10)
        MAX_PAGE_CHARS: Cleaned text ceiling per page (default: 8000)
        MAX_PAGE_BYTES: Response bytes read per page (default: 1000000)
        MAX_FETCH_URLS: Pages fetched per chat turn (default: 4)
        HISTORY_WINDOW: Prior messages sent to the model (default: 10)
        MAX_SYSTEM_PROMPT_CHARS: Soft system prompt ceiling (default: 40000)
        FETCH_USER_AGENT: User-Agent header for page fetches
    """
    config = config or Config()

    fetcher = PageFetcher(
        timeout_s=config.FETCH_TIMEOUT_S,
        max_chars=config.MAX_PAGE_CHARS,
        max_bytes=config.MAX_PAGE_BYTES,
        user_agent=config.FETCH_USER_AGENT,
    )

    logger.info(
        "Context assembler configured",
        extra={
            "extra_fields": {
                "fetch_timeout_s": config.FETCH_TIMEOUT_S,
                "max_fetch_urls": config.MAX_FETCH_URLS,
                "max_page_chars": config.MAX_PAGE_CHARS,
                "history_window": config.HISTORY_WINDOW,
            }
        },
    )

    return ContextAssembler(
        fetcher=fetcher,
        max_fetch_urls=config.MAX_FETCH_URLS,
        history_window=config.HISTORY_WINDOW,
        max_system_prompt_chars=config.MAX_SYSTEM_PROMPT_CHARS,
    )
