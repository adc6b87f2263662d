"""
Heuristic entity extraction from chat messages.

Each entity type has an ordered tuple of ExtractionRule objects. ``match_rules``
tries them in order; the first rule whose captured group survives trimming,
is longer than 2 characters and is not a stop word wins. Nothing here raises:
no match is ``None``.
"""

import re
from dataclasses import dataclass

URL_PATTERN = re.compile(r"(?i:https?)://[^\s<>\"']*[^\s<>\"'.,;:!?)\]}]")

MIN_ENTITY_CHARS = 3

# Leading words dropped from a capture before it is judged
FILLER_WORDS = frozenset(
    {
        "a", "an", "the", "what", "which", "who", "where", "when", "how", "why",
        "are", "is", "was", "were", "do", "does", "did", "can", "could", "any",
        "show", "tell", "me", "find", "list", "get", "give", "about", "at",
        "from", "in", "for", "of", "on", "events", "event", "upcoming",
    }
)

UNIVERSITY_STOP_WORDS = frozenset(
    {
        "the", "university", "college", "institute", "school", "campus", "my",
        "our", "your", "this", "that", "home", "work", "night", "noon", "today",
        "tomorrow", "usa", "gpa", "faq", "asap", "est", "pst",
    }
)

PROFESSOR_STOP_WORDS = frozenset(
    {
        "the", "office", "hours", "contact", "email", "who", "what", "that",
        "this", "for", "from", "and", "faculty", "staff", "department",
        "directory", "university", "college", "page", "website", "list",
        "teaches", "teaching", "there", "here", "your", "my", "our", "with",
        "about", "information", "info", "anyone", "someone", "name",
    }
)

DEPARTMENT_STOP_WORDS = frozenset(
    {
        "the", "this", "that", "which", "what", "our", "your", "my", "any",
        "each", "every", "university", "college", "institute", "faculty",
        "department", "same", "other", "whole",
    }
)

_SUBJECTS = (
    "electrical and computer engineering",
    "computer science",
    "computer engineering",
    "electrical engineering",
    "mechanical engineering",
    "civil engineering",
    "chemical engineering",
    "political science",
    "data science",
    "engineering",
    "mathematics",
    "math",
    "statistics",
    "physics",
    "chemistry",
    "biology",
    "economics",
    "psychology",
    "sociology",
    "philosophy",
    "history",
    "english",
    "linguistics",
    "business",
    "accounting",
    "finance",
    "marketing",
    "nursing",
    "medicine",
    "pharmacy",
    "law",
    "music",
    "art",
    "architecture",
    "education",
    "journalism",
)


@dataclass(frozen=True)
class ExtractionRule:
    name: str
    pattern: re.Pattern


@dataclass(frozen=True)
class RuleMatch:
    value: str
    rule: str


def _rule(name: str, pattern: str, flags: int = 0) -> ExtractionRule:
    return ExtractionRule(name=name, pattern=re.compile(pattern, flags))


_NAME_WORD = r"[A-Z][\w&'.-]*"
_INSTITUTION = r"(?:University|College|Institute)"
_OF_CLAUSE = rf"(?:\s+of(?:\s+{_NAME_WORD})+)?"
_PLACE_PREFIX = r"(?i:at|from|of|for|in|about|attend|attending|visit|visiting)"

UNIVERSITY_RULES: tuple[ExtractionRule, ...] = (
    # "at Howard University", "from the University of Michigan"
    _rule(
        "preposition_named",
        rf"\b{_PLACE_PREFIX}\s+(?:(?i:the)\s+)?((?:{_NAME_WORD}\s+){{0,3}}{_INSTITUTION}{_OF_CLAUSE})",
    ),
    # "Howard University events"
    _rule("named", rf"\b((?:{_NAME_WORD}\s+){{1,3}}{_INSTITUTION}{_OF_CLAUSE})"),
    # "University of Michigan" at the start of a sentence
    _rule("institution_of", rf"\b({_INSTITUTION}\s+of(?:\s+{_NAME_WORD})+)"),
    # "at howard university"
    _rule(
        "lowercase_named",
        r"\b(?:at|from|attend(?:ing)?|visit(?:ing)?)\s+(?:the\s+)?"
        r"([a-z][\w&'.-]*(?:\s+[a-z][\w&'.-]*)?)\s+(?:university|college)\b",
        re.IGNORECASE,
    ),
    # "events at UCLA"
    _rule("acronym", r"\b(?i:at|from|attend|attending|visit|visiting)\s+([A-Z]{3,6})\b"),
)

_TITLE = r"(?i:professor|prof\.?|dr\.?)"

PROFESSOR_RULES: tuple[ExtractionRule, ...] = (
    # "Professor Jane Smith", "Dr. Chen"
    _rule("titled_name", rf"\b{_TITLE}\s+([A-Z][\w'-]+(?:\s+[A-Z][\w'-]+){{0,2}})"),
    # "Smith's office hours"
    _rule(
        "possessive_contact",
        r"\b([A-Z][\w-]+(?:\s+[A-Z][\w-]+)?)'s\s+(?i:office\s+hours|office|email|contact|website|page)",
    ),
    # "professor smith"
    _rule("lowercase_titled", r"\b(?:professor|prof\.?|dr\.?)\s+([a-z][\w'-]+)", re.IGNORECASE),
    # "taught by Jane Smith"
    _rule(
        "taught_by",
        rf"\b(?i:taught\s+by|instructor|lecturer)\s+(?:{_TITLE}\s+)?([A-Z][\w'-]+(?:\s+[A-Z][\w'-]+)?)",
    ),
)

_DEPT_STOP_AHEAD = r"(?!(?:at|in|from|for|on|with|who|that|is|are)\b)"

DEPARTMENT_RULES: tuple[ExtractionRule, ...] = (
    # "Department of Computer Science at ..."
    _rule(
        "department_of",
        rf"\b(?:department|dept\.?|school|faculty)\s+of\s+"
        rf"([a-z][\w&'-]*(?:\s+{_DEPT_STOP_AHEAD}[a-z&][\w&'-]*){{0,3}})",
        re.IGNORECASE,
    ),
    # "physics professors", "who teaches computer science"
    _rule("known_subject", r"\b(" + "|".join(_SUBJECTS) + r")\b", re.IGNORECASE),
    # "the linguistics department"
    _rule(
        "named_department",
        r"\b([a-z][\w&'-]*(?:\s+[a-z][\w&'-]*)?)\s+(?:department|dept)\b",
        re.IGNORECASE,
    ),
)


def _trim(value: str) -> str:
    words = value.split()
    if words and words[-1].endswith("'s"):
        words[-1] = words[-1][:-2]
    while words and words[0].lower() in FILLER_WORDS:
        words.pop(0)
    return " ".join(words).rstrip(".,;:!?'\"-")


def match_rules(
    rules: tuple[ExtractionRule, ...], text: str, stop_words: frozenset[str]
) -> RuleMatch | None:
    """
    Return the first accepted match and the name of the rule that produced it.

    Rules are tried in order and every match of a rule is considered before
    the next rule, so a rejected first capture (a stop word, say) can still be
    followed by an accepted later capture of the same rule.
    """
    if not text:
        return None

    for rule in rules:
        for match in rule.pattern.finditer(text):
            value = _trim(match.group(1))
            if len(value) < MIN_ENTITY_CHARS or value.lower() in stop_words:
                continue
            return RuleMatch(value=value, rule=rule.name)
    return None


def extract_university(text: str) -> str | None:
    match = match_rules(UNIVERSITY_RULES, text, UNIVERSITY_STOP_WORDS)
    return match.value if match else None


def extract_professor(text: str) -> str | None:
    match = match_rules(PROFESSOR_RULES, text, PROFESSOR_STOP_WORDS)
    return match.value if match else None


def extract_department(text: str) -> str | None:
    match = match_rules(DEPARTMENT_RULES, text, DEPARTMENT_STOP_WORDS)
    return match.value if match else None


def extract_urls(text: str) -> list[str]:
    """Every http(s) token in order of appearance, duplicates included."""
    if not text:
        return []
    return URL_PATTERN.findall(text)
