import pytest

from dashboard_engine.input_parser import (
    count_categories,
    normalize_topics,
    normalize_trending,
    parse_numeric_or_default,
)
from dashboard_engine.models import CategoryCount, TopicRecord


@pytest.mark.parametrize(
    ("text", "kind", "expected"),
    [
        ("79", int, 79),
        ("59.50%", float, 59.5),
        ("58%", float, 58.0),
        ("1,234", int, 1),
        ("12.7", int, 12),
        ("  +42", int, 42),
        (".5", float, 0.5),
        ("1e3x", float, 1000.0),
        ("abc", int, 0),
        ("", float, 0),
        (None, int, 0),
        ("-5", int, 0),
    ],
)
def test_parse_numeric_or_default(text, kind, expected) -> None:
    assert parse_numeric_or_default(text, kind) == expected


def test_parse_numeric_or_default_custom_default() -> None:
    assert parse_numeric_or_default("n/a", float, 0.0) == 0.0
    assert parse_numeric_or_default("n/a", int, 7) == 7


def test_count_categories_keeps_first_seen_order() -> None:
    text = "Category\tKeyword\nA\tx\nB\ty\nA\tz"
    assert count_categories(text) == [
        CategoryCount(name="A", value=2),
        CategoryCount(name="B", value=1),
    ]


def test_count_categories_skips_blank_labels_and_compares_exactly() -> None:
    text = "Category\tKeyword\n\torphan\nGit\tpush\ngit\tpull\nGit \tclone\nGit\tfetch\n"
    result = count_categories(text)

    assert [(c.name, c.value) for c in result] == [("Git", 2), ("git", 1), ("Git ", 1)]
    # Sum equals the number of lines with a non-empty first field
    assert sum(c.value for c in result) == 4


def test_count_categories_header_only_or_empty() -> None:
    assert count_categories("") == []
    assert count_categories("Category\tKeyword") == []


def test_normalize_trending_percent_ctr_uses_numeric_prefix() -> None:
    records = normalize_trending("Term\tSearches\tCTR\npush\t79\t59.50%")

    assert len(records) == 1
    assert records[0].term == "push"
    assert records[0].searches == 79
    assert records[0].ctr == 59.5


def test_normalize_trending_bad_numbers_default_to_zero() -> None:
    records = normalize_trending("Term\tSearches\tCTR\npip\tabc\t\nlonely")

    assert [(r.term, r.searches, r.ctr) for r in records] == [("pip", 0, 0.0), ("lonely", 0, 0.0)]


def test_normalize_topics_in_input_order() -> None:
    records = normalize_topics("Topic\tViews\nFoo\t10\nBar\t20")

    assert records == [TopicRecord(topic="Foo", views=10), TopicRecord(topic="Bar", views=20)]
    assert sum(r.views for r in records) == 30


def test_windows_line_endings_and_trailing_newline() -> None:
    records = normalize_topics("Topic\tViews\r\nFoo\t10\r\nBar\t20\r\n")

    assert [(r.topic, r.views) for r in records] == [("Foo", 10), ("Bar", 20)]


def test_whitespace_only_lines_are_data() -> None:
    categories = count_categories("Category\tKeyword\n   \nA\tx")
    assert [(c.name, c.value) for c in categories] == [("   ", 1), ("A", 1)]

    topics = normalize_topics("Topic\tViews\n  \nFoo\t3")
    assert [(t.topic, t.views) for t in topics] == [("  ", 0), ("Foo", 3)]
