"""Summary -> recommendations pipeline and topic explanations.

Step two only starts once step one returned, and takes its text as input.
Explanations are independent requests and may run alongside the pipeline.
"""
from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable, Optional, Protocol, Sequence

from dashboard_engine.app_state import AppState
from dashboard_engine.models import AnalysisResult, TopicRecord, TrendingRecord

from .prompts import explanation_prompt, recommendations_prompt, summary_prompt

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> Awaitable[str]: ...


class AnalysisPipeline:
    """Runs the AI panel requests against a text generator (normally :class:`GeminiClient`)."""

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    async def summarize(self, topics: Sequence[TopicRecord], trending: Sequence[TrendingRecord]) -> str:
        return await self.generator.generate(summary_prompt(topics, trending))

    async def recommend(self, summary: str) -> str:
        return await self.generator.generate(recommendations_prompt(summary))

    async def run(self, topics: Sequence[TopicRecord], trending: Sequence[TrendingRecord]) -> AnalysisResult:
        """Generate the summary, then recommendations based on it."""
        start_time = time.time()
        logger.info(f"Generating AI analysis for {len(topics)} topics and {len(trending)} searches")

        summary = await self.summarize(topics, trending)
        recommendations = await self.recommend(summary)

        logger.info(f"AI analysis completed in {time.time() - start_time:.1f}s")
        return AnalysisResult(summary=summary, recommendations=recommendations)

    async def explain(self, topic: str) -> str:
        logger.info(f"Requesting explanation for topic '{topic}'")
        return await self.generator.generate(explanation_prompt(topic))

    # ------------------------------------------------------------------
    # AppState helpers
    # ------------------------------------------------------------------

    async def generate_analysis(
        self,
        state: AppState,
        on_update: Optional[Callable[[AppState], None]] = None,
    ) -> AppState:
        """Generate the summary, show it, then fetch recommendations based on it.

        *on_update* receives every intermediate state: pending, summary shown
        with recommendations still pending, and the final state.
        """
        notify = on_update or (lambda _state: None)

        pending = state.start_generation()
        notify(pending)

        summary = await self.summarize(pending.topics_data, pending.trending_data)
        with_summary = pending.with_summary(summary)
        notify(with_summary)

        recommendations = await self.recommend(summary)
        done = with_summary.with_analysis(AnalysisResult(summary=summary, recommendations=recommendations))
        notify(done)
        return done

    async def explain_topic(self, state: AppState, topic: str) -> AppState:
        pending = state.open_explanation(topic)
        return pending.with_explanation(await self.explain(topic))
