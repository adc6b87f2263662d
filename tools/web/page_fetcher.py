"""Best-effort single page fetching and text cleanup."""

import asyncio
import re

import httpx
from bs4 import BeautifulSoup

from config.config import DEFAULT_USER_AGENT, FETCH_TIMEOUT_S, MAX_PAGE_BYTES, MAX_PAGE_CHARS
from utils.logger import get_logger

from .contracts import CandidateURL, FetchResult
from .prompt_pack import render_page_text

logger = get_logger(__name__)

NON_CONTENT_TAGS = ["script", "style", "noscript", "nav", "footer", "iframe"]

_WHITESPACE = re.compile(r"\s+")


def clean_html(html: str, max_chars: int = MAX_PAGE_CHARS) -> str:
    """Visible text of a page with whitespace collapsed, cut to max_chars."""
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()

    text = _WHITESPACE.sub(" ", soup.get_text(separator=" ")).strip()
    return text[:max_chars]


class PageFetcher:
    """
    Time-bounded GET of candidate pages.

    ``fetch`` and ``fetch_all`` NEVER raise: every failure comes back as a
    FetchResult with ``failure`` set. No retries.
    """

    def __init__(
        self,
        timeout_s: float = FETCH_TIMEOUT_S,
        max_chars: int = MAX_PAGE_CHARS,
        max_bytes: int = MAX_PAGE_BYTES,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            timeout_s: Per-URL budget covering connect, read and parsing wait
            max_chars: Character ceiling for cleaned page text
            max_bytes: Response body bytes read before the rest is ignored
            user_agent: Client identity sent with every request
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.timeout_s = timeout_s
        self.max_chars = max_chars
        self.max_bytes = max_bytes
        self.user_agent = user_agent
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout_s,
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
            transport=self._transport,
        )

    async def _read_capped(self, response: httpx.Response) -> str:
        body = bytearray()
        async for chunk in response.aiter_bytes():
            body.extend(chunk)
            if len(body) >= self.max_bytes:
                break
        return bytes(body[: self.max_bytes]).decode(
            response.charset_encoding or "utf-8", errors="replace"
        )

    async def _get(self, client: httpx.AsyncClient, candidate: CandidateURL) -> FetchResult:
        async with client.stream("GET", candidate.url) as response:
            if not response.is_success:
                return FetchResult(
                    candidate=candidate,
                    failure="http_status",
                    detail=response.reason_phrase,
                    status_code=response.status_code,
                )
            html = await self._read_capped(response)

        # Parsing is CPU-bound; keep it off the event loop
        text = await asyncio.to_thread(clean_html, html, self.max_chars)
        if not text:
            return FetchResult(candidate=candidate, failure="empty", status_code=response.status_code)
        return FetchResult(candidate=candidate, text=text, status_code=response.status_code)

    async def _fetch_with(self, client: httpx.AsyncClient, candidate: CandidateURL) -> FetchResult:
        try:
            result = await asyncio.wait_for(self._get(client, candidate), timeout=self.timeout_s)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            result = FetchResult(
                candidate=candidate, failure="timeout", detail=f"{self.timeout_s:g}s"
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            result = FetchResult(candidate=candidate, failure="network", detail=type(e).__name__)
        except Exception as e:
            logger.error(
                f"Unexpected page fetch failure: {e}",
                exc_info=True,
                extra={"extra_fields": {"url": candidate.url}},
            )
            result = FetchResult(candidate=candidate, failure="error", detail=type(e).__name__)

        logger.info(
            "Page fetch finished",
            extra={
                "extra_fields": {
                    "url": candidate.url,
                    "origin": candidate.origin,
                    "ok": result.ok,
                    "failure": result.failure,
                    "status_code": result.status_code,
                    "chars": len(result.text or ""),
                }
            },
        )
        return result

    async def fetch(self, url: str | CandidateURL) -> FetchResult:
        candidate = url if isinstance(url, CandidateURL) else CandidateURL(url=url, origin="literal")
        async with self._client() as client:
            return await self._fetch_with(client, candidate)

    async def fetch_all(self, candidates: list[CandidateURL]) -> list[FetchResult]:
        """Fetch every candidate concurrently; results keep the input order."""
        if not candidates:
            return []
        async with self._client() as client:
            return list(
                await asyncio.gather(*(self._fetch_with(client, c) for c in candidates))
            )

    async def fetch_page(self, url: str) -> str:
        """Cleaned page text, or a bracketed placeholder naming the failure."""
        return render_page_text(await self.fetch(url))
