"""Shared pytest fixtures: the sample tables used across the test-suite."""
import pytest

from dashboard_engine.sample_data import KEYWORD_SAMPLE, TOPICS_SAMPLE, TRENDING_SAMPLE


@pytest.fixture
def sample_tables() -> dict[str, str]:
    return {
        "keyword_input": KEYWORD_SAMPLE,
        "trending_input": TRENDING_SAMPLE,
        "topics_input": TOPICS_SAMPLE,
    }
