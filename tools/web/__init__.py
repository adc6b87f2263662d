"""Context enrichment tools: extraction, URL candidates, page fetching, prompt assembly."""

from .context_assembler import ContextAssembler
from .contracts import CandidateURL, FetchResult, PromptContext
from .factory import create_context_assembler_from_env
from .page_fetcher import PageFetcher

__all__ = [
    "CandidateURL",
    "ContextAssembler",
    "FetchResult",
    "PageFetcher",
    "PromptContext",
    "create_context_assembler_from_env",
]
