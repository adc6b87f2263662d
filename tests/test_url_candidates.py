from tools.web.url_candidates import (
    KNOWN_EVENT_PAGES,
    generate_event_urls,
    generate_professor_urls,
    known_event_urls,
    normalize_institution,
)


def test_normalize_institution():
    assert normalize_institution("Howard University") == "howard"
    assert normalize_institution("University of Southern California") == "southerncalifornia"
    assert normalize_institution("The Ohio  State University") == "ohiostate"
    assert normalize_institution("St. John's College") == "stjohns"
    assert normalize_institution("University of the") == ""


def test_known_institution_returns_exactly_mapped_urls():
    assert generate_event_urls("Howard University") == KNOWN_EVENT_PAGES["howard"]
    assert generate_event_urls("howard") == ["https://howard.edu/events"]
    assert known_event_urls("What events are happening at HOWARD?") == ["https://howard.edu/events"]
    assert known_event_urls("What events are on?") == []


def test_generated_event_urls_are_ordered_and_deterministic():
    urls = generate_event_urls("Morehouse College")
    assert urls[0] == "https://www.morehouse.edu/events"
    assert urls[1] == "https://events.morehouse.edu"
    assert "https://www.morehouse.ac.uk/events" in urls
    assert generate_event_urls("Morehouse College") == urls


def test_empty_token_yields_no_candidates():
    assert generate_event_urls("University of the") == []
    assert generate_professor_urls("") == []


def test_professor_branch_encodes_name():
    urls = generate_professor_urls("Morehouse College", "Jane Smith")
    assert urls[0] == "https://www.morehouse.edu/search?q=Jane+Smith"
    assert "https://www.morehouse.edu/people/jane-smith" in urls


def test_professor_branch_wins_over_department():
    with_both = generate_professor_urls("Morehouse College", "Jane Smith", "Biology")
    assert with_both == generate_professor_urls("Morehouse College", "Jane Smith")


def test_department_branch():
    urls = generate_professor_urls("Morehouse College", department="Computer Science")
    assert urls[:2] == [
        "https://www.morehouse.edu/computer-science/faculty",
        "https://computerscience.morehouse.edu/faculty",
    ]


def test_generic_directory_branch():
    urls = generate_professor_urls("Morehouse College")
    assert urls[0] == "https://www.morehouse.edu/directory"
    assert len(urls) == len(set(urls))


def test_extracted_institutions_always_yield_candidates():
    from tools.web.extractors import extract_university

    for text in (
        "Any events at Morehouse College?",
        "events at the University of Michigan",
        "Are there events at UCLA tomorrow?",
        "any events at howard university this week?",
    ):
        assert generate_event_urls(extract_university(text))
