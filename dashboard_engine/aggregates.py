"""Headline numbers derived from the parsed tables."""
from __future__ import annotations

from typing import Sequence

from .models import CategoryCount, DashboardSummary, TopicRecord, TrendingRecord

NO_CATEGORY = "N/A"


def total_topic_views(topics: Sequence[TopicRecord]) -> int:
    return sum(item.views for item in topics)


def total_searches(trending: Sequence[TrendingRecord]) -> int:
    return sum(item.searches for item in trending)


def top_category(categories: Sequence[CategoryCount]) -> str:
    """Return the category with the most keywords.

    Ties go to the category seen first; an empty table gives ``"N/A"``.
    """
    if not categories:
        return NO_CATEGORY

    best = categories[0]
    for current in categories[1:]:
        if current.value > best.value:
            best = current
    return best.name


def summarize(
    categories: Sequence[CategoryCount],
    trending: Sequence[TrendingRecord],
    topics: Sequence[TopicRecord],
) -> DashboardSummary:
    """Bundle the three headline numbers for the results view."""
    return DashboardSummary(
        top_category=top_category(categories),
        total_topic_views=total_topic_views(topics),
        total_searches=total_searches(trending),
    )
