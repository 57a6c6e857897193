"""Explicit application state for the dashboard and its transitions.

The dashboard has two views: the input view (three pasted tables) and the
results view (charts, headline numbers, AI panel). :class:`AppState` is
immutable; every transition returns a new state so rendering code only ever
reads a snapshot.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .aggregates import summarize
from .errors import InputError
from .input_parser import count_categories, normalize_topics, normalize_trending
from .models import AnalysisResult, CategoryCount, DashboardSummary, TopicRecord, TrendingRecord

logger = logging.getLogger(__name__)

PARSE_FAILURE_MESSAGE = (
    "Failed to parse data. Please ensure it is tab-separated and matches the placeholder format."
)

ParsedTables = Tuple[List[CategoryCount], List[TrendingRecord], List[TopicRecord]]


def parse_tables(keyword_text: str, trending_text: str, topics_text: str) -> ParsedTables:
    """Run the three parsers and reject the case where all of them came back empty.

    Raises:
        InputError: if no table produced a single row.
    """
    categories = count_categories(keyword_text)
    trending = normalize_trending(trending_text)
    topics = normalize_topics(topics_text)

    if not categories and not trending and not topics:
        raise InputError()

    logger.info(
        f"Parsed {len(categories)} categories, {len(trending)} trending searches, {len(topics)} topics"
    )
    return categories, trending, topics


class AppState(BaseModel):
    """Snapshot of everything the dashboard shows."""

    # Raw pasted text
    keyword_input: str = ""
    trending_input: str = ""
    topics_input: str = ""

    # Parsed chart data
    keyword_data: List[CategoryCount] = Field(default_factory=list)
    trending_data: List[TrendingRecord] = Field(default_factory=list)
    topics_data: List[TopicRecord] = Field(default_factory=list)

    # Flow
    is_analyzed: bool = False
    error: str = ""

    # AI panel
    summary: str = ""
    recommendations: str = ""
    is_generating: bool = False
    modal_topic: Optional[str] = None
    explanation: str = ""

    model_config = {
        "frozen": True,
    }

    # ------------------------------------------------------------------
    # Input view
    # ------------------------------------------------------------------

    def with_inputs(
        self,
        keyword_input: Optional[str] = None,
        trending_input: Optional[str] = None,
        topics_input: Optional[str] = None,
    ) -> "AppState":
        """Replace any of the raw text inputs that are given."""
        update = {
            key: value
            for key, value in (
                ("keyword_input", keyword_input),
                ("trending_input", trending_input),
                ("topics_input", topics_input),
            )
            if value is not None
        }
        return self.model_copy(update=update)

    def analyze(self) -> "AppState":
        """Parse the raw inputs and move to the results view.

        On failure the state stays on the input view with ``error`` set.
        """
        cleared = self.model_copy(update={"error": ""})
        try:
            categories, trending, topics = parse_tables(
                self.keyword_input, self.trending_input, self.topics_input
            )
        except InputError as e:
            logger.warning(f"Analyze rejected: {e}")
            return cleared.model_copy(
                update={"keyword_data": [], "trending_data": [], "topics_data": [], "error": str(e)}
            )
        except Exception:
            logger.exception("Unexpected failure while parsing pasted data")
            return cleared.model_copy(
                update={"keyword_data": [], "trending_data": [], "topics_data": [], "error": PARSE_FAILURE_MESSAGE}
            )

        return cleared.model_copy(
            update={
                "keyword_data": categories,
                "trending_data": trending,
                "topics_data": topics,
                "is_analyzed": True,
            }
        )

    def reset(self) -> "AppState":
        """Start over: back to an empty input view."""
        return AppState()

    # ------------------------------------------------------------------
    # Results view
    # ------------------------------------------------------------------

    @property
    def dashboard_summary(self) -> DashboardSummary:
        return summarize(self.keyword_data, self.trending_data, self.topics_data)

    def start_generation(self) -> "AppState":
        return self.model_copy(update={"is_generating": True, "summary": "", "recommendations": ""})

    def with_summary(self, summary: str) -> "AppState":
        return self.model_copy(update={"summary": summary})

    def with_analysis(self, result: AnalysisResult) -> "AppState":
        """Store the AI summary and recommendations and end the pending state."""
        return self.model_copy(
            update={
                "summary": result.summary,
                "recommendations": result.recommendations,
                "is_generating": False,
            }
        )

    def open_explanation(self, topic: str) -> "AppState":
        return self.model_copy(update={"modal_topic": topic, "explanation": ""})

    def with_explanation(self, explanation: str) -> "AppState":
        return self.model_copy(update={"explanation": explanation})

    def close_explanation(self) -> "AppState":
        return self.model_copy(update={"modal_topic": None})
