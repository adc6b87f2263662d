"""Intent detection for deciding which web lookups a message needs."""

EVENT_KEYWORDS = (
    "event",
    "happening",
    "activities",
    "activity",
    "calendar",
    "concert",
    "festival",
    "workshop",
    "career fair",
    "what's on",
    "whats on",
    "going on",
    "things to do",
)

PROFESSOR_KEYWORDS = (
    "professor",
    "prof.",
    "prof ",
    "faculty",
    "staff",
    "instructor",
    "lecturer",
    "office hours",
    "contact",
    "email",
    "dr.",
    "who teaches",
    "taught by",
)


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    text_lower = (text or "").lower()
    return any(keyword in text_lower for keyword in keywords)


def wants_events(text: str) -> bool:
    """
    Detect if a message asks about campus events.

    Args:
        text: User message

    Returns:
        True if any event keyword appears (case-insensitive)
    """
    return _contains_any(text, EVENT_KEYWORDS)


def wants_professor(text: str) -> bool:
    """
    Detect if a message asks about a professor, faculty or staff contact.

    Args:
        text: User message

    Returns:
        True if any professor keyword appears (case-insensitive)
    """
    return _contains_any(text, PROFESSOR_KEYWORDS)
