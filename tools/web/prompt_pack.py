"""Render campus records and fetched pages into system-prompt text."""

from models.campus import CampusRecords

from .contracts import FetchResult

WEB_BLOCK_HEADER = "WEB PAGE CONTENT FROM {url}:"

SYSTEM_PREAMBLE = """You are a helpful campus AI assistant. You have access to the following campus information:"""

BEHAVIOR_RULES = """When answering questions:
- Be helpful and concise
- Reference specific events, deadlines, or tutoring sessions when relevant
- If web page content is included below, use it to answer questions about other institutions, their events, or their faculty, and mention the page you relied on
- Text in square brackets means a page could not be read; do not invent its contents
- If asked about something not in the data, politely say you don't have that information
- Format your responses in a clear, readable way"""


def render_placeholder(result: FetchResult) -> str:
    """Bracketed sentinel shown to the model in place of page text."""
    if result.failure == "timeout":
        return f"[Could not fetch {result.url}: timed out after {result.detail}]"
    if result.failure == "http_status":
        return f"[Could not fetch {result.url}: HTTP {result.status_code}]"
    if result.failure == "empty":
        return f"[No readable content found at {result.url}]"
    return f"[Could not fetch {result.url}: {result.detail or 'request failed'}]"


def render_page_text(result: FetchResult) -> str:
    return result.text if result.ok else render_placeholder(result)


def render_web_block(result: FetchResult, limit: int | None = None) -> str:
    body = render_page_text(result)
    if limit is not None and len(body) > limit:
        body = body[:limit].rstrip() + " ..."
    return f"{WEB_BLOCK_HEADER.format(url=result.url)}\n{body}"


def build_campus_section(records: CampusRecords) -> str:
    events = "\n".join(
        f"- {e.title} on {e.date} at {e.time} in {e.location} ({e.category})"
        for e in records.events
    )
    deadlines = "\n".join(
        f"- {d.title} due {d.due_date}" + (f" for {d.course}" if d.course else "")
        for d in records.deadlines
    )
    tutoring = "\n".join(
        f"- {t.subject} with {t.tutor} at {t.time} in {t.location} ({t.availability})"
        for t in records.tutoring_sessions
    )
    return (
        f"UPCOMING EVENTS:\n{events}\n\n"
        f"DEADLINES:\n{deadlines}\n\n"
        f"TUTORING SESSIONS:\n{tutoring}"
    )


def build_system_prompt(
    records: CampusRecords, results: list[FetchResult], max_chars: int
) -> str:
    """
    Preamble, campus records, then one block per fetched page.

    Page blocks are shortened or dropped once ``max_chars`` would be exceeded;
    the preamble and campus records are always kept whole.
    """
    prompt = f"{SYSTEM_PREAMBLE}\n\n{build_campus_section(records)}\n\n{BEHAVIOR_RULES}"

    for result in results:
        header_len = len(WEB_BLOCK_HEADER.format(url=result.url)) + 3
        remaining = max_chars - len(prompt) - header_len
        if remaining <= 0:
            break
        prompt += "\n\n" + render_web_block(result, limit=remaining)

    return prompt
