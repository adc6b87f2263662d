"""Data contracts for the context-enrichment pipeline."""

from dataclasses import dataclass, field
from typing import Literal

from models.campus import CampusRecords

CandidateOrigin = Literal["literal", "known", "generated"]
FetchFailure = Literal["timeout", "http_status", "network", "empty", "error"]


@dataclass(frozen=True)
class CandidateURL:
    """An address considered for fetching, tagged with where it came from."""

    url: str
    origin: CandidateOrigin


@dataclass(frozen=True)
class FetchResult:
    """Cleaned page text, or the reason there is none."""

    candidate: CandidateURL
    text: str | None = None
    failure: FetchFailure | None = None
    detail: str = ""
    status_code: int | None = None

    @property
    def url(self) -> str:
        return self.candidate.url

    @property
    def ok(self) -> bool:
        return self.failure is None and bool(self.text)


@dataclass(frozen=True)
class PromptContext:
    """Everything sent to the model for one chat turn."""

    system_prompt: str
    messages: list[dict[str, str]]
    records: CampusRecords
    candidates: list[CandidateURL] = field(default_factory=list)
    fetch_results: list[FetchResult] = field(default_factory=list)

    @property
    def fetched_urls(self) -> list[str]:
        return [r.url for r in self.fetch_results]
