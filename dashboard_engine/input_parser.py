"""Turn pasted tab-separated tables into dashboard records.

Every table starts with a header line which is always discarded. Fields are
separated by a single tab; there is no quoting, so a field can never contain
a tab itself.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, Iterator, List, Type, Union

from .models import CategoryCount, TopicRecord, TrendingRecord

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Longest unsigned numeric prefix, after optional whitespace and '+'.
_INT_PREFIX = re.compile(r"\s*\+?\d+")
_FLOAT_PREFIX = re.compile(r"\s*\+?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_numeric_or_default(
    text: str | None,
    kind: Type[Number] = int,
    default: Number = 0,
) -> Number:
    """Parse the numeric prefix of *text* as *kind*, or return *default*.

    Trailing characters after the prefix are ignored, so ``"59.50%"`` parses
    as ``59.5`` and ``"1,234"`` as ``1``. Missing, empty, negative and
    non-numeric values all fall back to *default*.
    """
    if not text:
        return default

    pattern = _INT_PREFIX if kind is int else _FLOAT_PREFIX
    match = pattern.match(text)
    if match is None:
        return default

    try:
        return kind(match.group(0))
    except (ValueError, OverflowError):
        return default


def _data_lines(raw_text: str) -> Iterator[str]:
    """Yield the non-empty lines of *raw_text* after the header line."""
    for line in raw_text.split("\n")[1:]:
        line = line.rstrip("\r")
        if line:
            yield line


def count_categories(raw_text: str) -> List[CategoryCount]:
    """Count keyword rows per category, in first-seen order.

    The category is the first tab-separated field. Rows with an empty
    category are skipped; labels are compared exactly (no trimming, no case
    folding).
    """
    counts: Dict[str, int] = {}
    for line in _data_lines(raw_text):
        category = line.split("\t")[0]
        if category:
            counts[category] = counts.get(category, 0) + 1

    return [CategoryCount(name=name, value=value) for name, value in counts.items()]


def normalize_trending(raw_text: str) -> List[TrendingRecord]:
    """Parse ``Term<TAB>Searches<TAB>CTR`` rows into :class:`TrendingRecord` objects."""
    records: List[TrendingRecord] = []
    for line in _data_lines(raw_text):
        fields = line.split("\t")
        term = fields[0]
        searches = fields[1] if len(fields) > 1 else None
        ctr = fields[2] if len(fields) > 2 else None
        records.append(
            TrendingRecord(
                term=term,
                searches=parse_numeric_or_default(searches, int),
                ctr=parse_numeric_or_default(ctr, float, 0.0),
            ),
        )
    return records


def normalize_topics(raw_text: str) -> List[TopicRecord]:
    """Parse ``Topic<TAB>Views`` rows into :class:`TopicRecord` objects."""
    records: List[TopicRecord] = []
    for line in _data_lines(raw_text):
        fields = line.split("\t")
        views = fields[1] if len(fields) > 1 else None
        records.append(TopicRecord(topic=fields[0], views=parse_numeric_or_default(views, int)))
    return records
