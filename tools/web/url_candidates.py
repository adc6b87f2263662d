"""
Candidate URL generation for institution events pages and faculty directories.

Pure string construction: nothing here checks that a URL is reachable.
Template order matters because callers only consume a prefix of each list.
"""

import re
from urllib.parse import quote_plus

# Real events pages, matched by case-insensitive substring of the input
KNOWN_EVENT_PAGES: dict[str, list[str]] = {
    "howard": ["https://howard.edu/events"],
    "harvard": ["https://www.harvard.edu/events/"],
    "stanford": ["https://events.stanford.edu/"],
    "yale": ["https://calendar.yale.edu/"],
    "princeton": ["https://www.princeton.edu/events"],
    "georgetown": ["https://calendar.georgetown.edu/"],
    "spelman": ["https://www.spelman.edu/events/"],
}

_NOISE_WORDS = re.compile(r"\b(?:university|college|institute|of|the)\b")
_NON_HOST_CHARS = re.compile(r"[^a-z0-9-]")

EVENT_URL_TEMPLATES = (
    "https://www.{token}.edu/events",
    "https://events.{token}.edu",
    "https://calendar.{token}.edu",
    "https://www.{token}.edu/calendar",
    "https://www.{token}.edu/student-life/events",
    "https://studentlife.{token}.edu/events",
    "https://www.{token}.ac.uk/events",
    "https://www.{token}.edu.au/events",
    "https://www.{token}.ca/events",
)

PROFESSOR_URL_TEMPLATES = (
    "https://www.{token}.edu/search?q={query}",
    "https://directory.{token}.edu/search?name={query}",
    "https://www.{token}.edu/directory?search={query}",
    "https://www.{token}.edu/people/{slug}",
    "https://www.{token}.edu/faculty/{slug}",
    "https://www.{token}.edu/profile/{slug}",
)

DEPARTMENT_URL_TEMPLATES = (
    "https://www.{token}.edu/{dept_slug}/faculty",
    "https://{dept}.{token}.edu/faculty",
    "https://{dept}.{token}.edu/people",
    "https://www.{token}.edu/departments/{dept_slug}/faculty",
    "https://www.{token}.edu/academics/{dept_slug}/faculty",
)

DIRECTORY_URL_TEMPLATES = (
    "https://www.{token}.edu/directory",
    "https://directory.{token}.edu",
    "https://www.{token}.edu/faculty",
    "https://www.{token}.edu/people",
    "https://www.{token}.edu/faculty-directory",
)


def normalize_institution(name: str) -> str:
    """
    Turn an institution name into a domain label candidate.

    "Howard University" -> "howard", "University of Southern California" ->
    "southerncalifornia".
    """
    text = _NOISE_WORDS.sub(" ", (name or "").lower())
    text = " ".join(text.split()).replace(" ", "")
    return _NON_HOST_CHARS.sub("", text)


def _slug(value: str, sep: str = "-") -> str:
    words = re.findall(r"[a-z0-9]+", (value or "").lower())
    return sep.join(words)


def known_event_urls(text: str) -> list[str]:
    """Mapped events pages for the first known institution mentioned in text."""
    text_lower = (text or "").lower()
    for key, urls in KNOWN_EVENT_PAGES.items():
        if key in text_lower:
            return list(urls)
    return []


def generate_event_urls(university_name: str) -> list[str]:
    """
    Events-page candidates for an institution, best guess first.

    Known institutions get their mapped pages only. Any other name gets the
    full template list, except when normalization leaves no token (e.g.
    "University of the"), which yields an empty list.
    """
    known = known_event_urls(university_name)
    if known:
        return known

    token = normalize_institution(university_name)
    if not token:
        return []
    return [template.format(token=token) for template in EVENT_URL_TEMPLATES]


def generate_professor_urls(
    university_name: str,
    professor_name: str | None = None,
    department: str | None = None,
) -> list[str]:
    """
    Faculty-directory candidates, branching on which details are known.

    - professor given: name searches and profile slugs
    - department given: department faculty pages
    - neither: generic directory pages
    """
    token = normalize_institution(university_name)
    if not token:
        return []

    if professor_name and _slug(professor_name):
        query = quote_plus(" ".join(professor_name.split()))
        slug = _slug(professor_name)
        return [
            template.format(token=token, query=query, slug=slug)
            for template in PROFESSOR_URL_TEMPLATES
        ]

    if department and _slug(department):
        return [
            template.format(token=token, dept=_slug(department, sep=""), dept_slug=_slug(department))
            for template in DEPARTMENT_URL_TEMPLATES
        ]

    return [template.format(token=token) for template in DIRECTORY_URL_TEMPLATES]
