"""
ContextAssembler - builds the model prompt for one chat turn.

Pipeline:
    literal URLs -> intent checks -> known map / generated candidates
    -> global cap -> concurrent fetch -> system prompt -> message list

Extraction and URL generation are pure string logic and fetching never
raises, so ``build`` only fails if the caller's records are unusable.
"""

from config.config import HISTORY_WINDOW, MAX_FETCH_URLS, MAX_SYSTEM_PROMPT_CHARS
from models.campus import CampusRecords, ChatMessage
from utils.logger import get_logger

from .contracts import CandidateURL, PromptContext
from .extractors import extract_department, extract_professor, extract_university, extract_urls
from .intent import wants_events, wants_professor
from .page_fetcher import PageFetcher
from .prompt_pack import build_system_prompt
from .url_candidates import generate_event_urls, generate_professor_urls, known_event_urls

logger = get_logger(__name__)


class ContextAssembler:
    """Request-scoped prompt builder; holds configuration only."""

    def __init__(
        self,
        fetcher: PageFetcher,
        max_fetch_urls: int = MAX_FETCH_URLS,
        history_window: int = HISTORY_WINDOW,
        max_system_prompt_chars: int = MAX_SYSTEM_PROMPT_CHARS,
    ):
        self.fetcher = fetcher
        self.max_fetch_urls = max_fetch_urls
        self.history_window = history_window
        self.max_system_prompt_chars = max_system_prompt_chars

    def _event_candidates(self, utterance: str) -> list[CandidateURL]:
        known = known_event_urls(utterance)
        if known:
            return [CandidateURL(url=u, origin="known") for u in known]

        university = extract_university(utterance)
        if not university:
            return []
        urls = generate_event_urls(university)[: self.max_fetch_urls]
        return [CandidateURL(url=u, origin="generated") for u in urls]

    def _professor_candidates(self, utterance: str) -> list[CandidateURL]:
        university = extract_university(utterance)
        if not university:
            return []
        professor = extract_professor(utterance)
        department = extract_department(utterance)
        urls = generate_professor_urls(university, professor, department)[: self.max_fetch_urls]
        return [CandidateURL(url=u, origin="generated") for u in urls]

    def select_candidates(self, utterance: str) -> list[CandidateURL]:
        """
        Ordered, de-duplicated URLs to fetch, capped at ``max_fetch_urls``.

        Literal URLs come first, then the event path, then the professor path.
        The cap applies to the combined list, not per category.
        """
        candidates = [CandidateURL(url=u, origin="literal") for u in extract_urls(utterance)]

        if wants_events(utterance):
            candidates.extend(self._event_candidates(utterance))
        if wants_professor(utterance):
            candidates.extend(self._professor_candidates(utterance))

        selected: list[CandidateURL] = []
        seen: set[str] = set()
        for candidate in candidates:
            if candidate.url in seen:
                continue
            seen.add(candidate.url)
            selected.append(candidate)

        return selected[: self.max_fetch_urls]

    def history_messages(
        self, history: list[ChatMessage], exclude_message_id: str | None = None
    ) -> list[dict[str, str]]:
        prior = [m for m in history if m.id != exclude_message_id]
        window = prior[-self.history_window :] if self.history_window > 0 else []
        return [{"role": m.role, "content": m.message} for m in window]

    async def build(
        self,
        utterance: str,
        records: CampusRecords,
        history: list[ChatMessage],
        exclude_message_id: str | None = None,
    ) -> PromptContext:
        """
        Assemble the full message list for the model.

        Args:
            utterance: The new user message
            records: Campus data snapshot rendered into the system prompt
            history: Stored chat messages in insertion order
            exclude_message_id: Id of the just-stored user message, left out of history

        Returns:
            PromptContext with system prompt, messages and fetch results
        """
        candidates = self.select_candidates(utterance)
        results = await self.fetcher.fetch_all(candidates)

        system_prompt = build_system_prompt(records, results, self.max_system_prompt_chars)

        messages = [{"role": "system", "content": system_prompt}]
        messages.extend(self.history_messages(history, exclude_message_id))
        messages.append({"role": "user", "content": utterance})

        logger.info(
            "Prompt context assembled",
            extra={
                "extra_fields": {
                    "candidates": [c.url for c in candidates],
                    "fetched_ok": sum(1 for r in results if r.ok),
                    "history_messages": len(messages) - 2,
                    "system_prompt_chars": len(system_prompt),
                }
            },
        )

        return PromptContext(
            system_prompt=system_prompt,
            messages=messages,
            records=records,
            candidates=candidates,
            fetch_results=results,
        )
