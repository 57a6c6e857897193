"""Pydantic data models shared by the parsers, the report and the AI pipeline."""
from __future__ import annotations

from pydantic import BaseModel, Field


class CategoryCount(BaseModel):
    """Number of keyword rows seen for one problem category."""

    name: str = Field(..., description="Category label exactly as pasted, e.g. 'GIT/VC'")
    value: int = Field(..., ge=0, description="Number of keyword rows carrying this label")

    model_config = {
        "frozen": True,
    }


class TrendingRecord(BaseModel):
    """One row of the trending-searches table."""

    term: str = Field(..., description="Search term, used verbatim")
    searches: int = Field(0, ge=0, description="Search count, 0 when unparseable")
    ctr: float = Field(0.0, ge=0, description="Click-through rate in percent, 0 when unparseable")

    model_config = {
        "frozen": True,
    }


class TopicRecord(BaseModel):
    """One row of the top-topics table."""

    topic: str = Field(..., description="Support topic or article title")
    views: int = Field(0, ge=0, description="View count, 0 when unparseable")

    model_config = {
        "frozen": True,
    }


class DashboardSummary(BaseModel):
    """Headline numbers shown above the charts."""

    top_category: str = Field(..., description="Category with the most keywords or 'N/A'")
    total_topic_views: int = Field(0, ge=0)
    total_searches: int = Field(0, ge=0)

    model_config = {
        "frozen": True,
    }


class AnalysisResult(BaseModel):
    """Output of the summary -> recommendations AI pipeline."""

    summary: str = ""
    recommendations: str = ""

    model_config = {
        "frozen": True,
    }
