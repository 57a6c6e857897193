"""Prompt builders for the AI panel."""
from __future__ import annotations

from typing import Sequence

from dashboard_engine.models import TopicRecord, TrendingRecord

TOP_N = 5


def format_top_topics(topics: Sequence[TopicRecord], limit: int = TOP_N) -> str:
    return ", ".join(f"'{t.topic}' ({t.views} views)" for t in topics[:limit])


def format_top_searches(trending: Sequence[TrendingRecord], limit: int = TOP_N) -> str:
    return ", ".join(f"'{s.term}' ({s.searches} searches)" for s in trending[:limit])


def summary_prompt(topics: Sequence[TopicRecord], trending: Sequence[TrendingRecord]) -> str:
    """Ask for a short summary of the main user problems (first 5 rows of each table)."""
    return (
        "You are a data analyst for a developer support team. Based on the following data, "
        "write a concise summary of the main user problems. "
        f"Top viewed topics: {format_top_topics(topics)}. "
        f"Top search terms: {format_top_searches(trending)}."
    )


def recommendations_prompt(summary: str) -> str:
    return (
        f'Based on this analysis of user problems: "{summary}", suggest 3-5 concrete, '
        "actionable recommendations for the support team to improve documentation "
        "and reduce user friction."
    )


def explanation_prompt(topic: str) -> str:
    return (
        "You are a helpful assistant for developers. Explain the following topic to a "
        "beginner developer in a clear and simple way. If it is an error message, explain "
        "the common causes and how to fix it. If it is a concept, provide a simple code "
        f'example if relevant. The topic is: "{topic}"'
    )
