from dashboard_engine.aggregates import summarize, top_category, total_searches, total_topic_views
from dashboard_engine.models import CategoryCount, TopicRecord, TrendingRecord


def test_top_category_first_maximum_wins() -> None:
    counts = [
        CategoryCount(name="A", value=3),
        CategoryCount(name="B", value=5),
        CategoryCount(name="C", value=5),
    ]
    assert top_category(counts) == "B"


def test_top_category_empty() -> None:
    assert top_category([]) == "N/A"


def test_totals() -> None:
    topics = [TopicRecord(topic="Foo", views=10), TopicRecord(topic="Bar", views=20)]
    trending = [TrendingRecord(term="push", searches=79, ctr=59.5), TrendingRecord(term="pip", searches=50)]

    assert total_topic_views(topics) == 30
    assert total_searches(trending) == 129
    assert total_topic_views([]) == 0


def test_summarize() -> None:
    summary = summarize([CategoryCount(name="GIT/VC", value=2)], [], [TopicRecord(topic="x", views=4)])

    assert summary.top_category == "GIT/VC"
    assert summary.total_topic_views == 4
    assert summary.total_searches == 0
