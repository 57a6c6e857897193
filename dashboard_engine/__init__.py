"""Support Insights dashboard engine.

Parses pasted tab-separated tables (keyword categories, trending searches,
top topics) into chart-ready records and holds the dashboard's application
state.
"""

__all__ = [
    "AppState",
    "CategoryCount",
    "TopicRecord",
    "TrendingRecord",
]

__version__ = "0.1.0"

from .app_state import AppState
from .models import CategoryCount, TopicRecord, TrendingRecord
