#!/usr/bin/env python3
"""
Support Dashboard Builder - turn three tab-separated tables into a dashboard.

Inputs are the same tables a user would paste from a spreadsheet:
1. Keyword categories  (Category<TAB>Keyword)
2. Trending searches   (Term<TAB>Searches<TAB>CTR)
3. Top topics          (Topic<TAB>Views)

Any of them may be omitted, but at least one must contain data.

Usage
-----
python scripts/build_dashboard.py --sample
python scripts/build_dashboard.py --keywords kw.tsv --trending trending.tsv --topics topics.tsv
python scripts/build_dashboard.py --topics topics.tsv --with-ai --output output/
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ai_insights.analysis_pipeline import AnalysisPipeline
from ai_insights.gemini_client import GeminiClient
from dashboard_engine.app_state import AppState
from dashboard_engine.report import DashboardReportGenerator
from dashboard_engine.sample_data import KEYWORD_SAMPLE, TOPICS_SAMPLE, TRENDING_SAMPLE

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _read_table(path: Optional[Path]) -> str:
    """Return the file contents, or an empty table when no path was given."""
    if path is None:
        return ""
    return path.read_text(encoding="utf-8-sig")


async def _generate_analysis(state: AppState) -> AppState:
    async with GeminiClient() as client:
        return await AnalysisPipeline(client).generate_analysis(state)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the support & activity dashboard from TSV tables")
    parser.add_argument("--keywords", type=Path, help="Keyword categories table (Category<TAB>Keyword)")
    parser.add_argument("--trending", type=Path, help="Trending searches table (Term<TAB>Searches<TAB>CTR)")
    parser.add_argument("--topics", type=Path, help="Top topics table (Topic<TAB>Views)")
    parser.add_argument("--sample", action="store_true", help="Use the built-in sample tables")
    parser.add_argument("--output", "-o", type=Path, default=Path("output"), help="Output directory (default: output/)")
    parser.add_argument(
        "--with-ai",
        dest="with_ai",
        action="store_true",
        help="Also generate an AI summary and recommendations (needs GEMINI_API_KEY)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    if args.sample:
        keyword_text, trending_text, topics_text = KEYWORD_SAMPLE, TRENDING_SAMPLE, TOPICS_SAMPLE
    else:
        try:
            keyword_text = _read_table(args.keywords)
            trending_text = _read_table(args.trending)
            topics_text = _read_table(args.topics)
        except OSError as e:
            logger.error(f"Could not read input table: {e}")
            return 1

    state = AppState().with_inputs(keyword_text, trending_text, topics_text).analyze()
    if not state.is_analyzed:
        logger.error(state.error)
        print(f"❌ {state.error}", file=sys.stderr)
        return 1

    if args.with_ai:
        state = asyncio.run(_generate_analysis(state))

    paths = DashboardReportGenerator(state).save(args.output)
    summary = state.dashboard_summary

    print("✅ Dashboard generated successfully!")
    print(f"📄 Saved to: {paths['dashboard.html']}")
    print(f"🏷️ #1 problem category: {summary.top_category}")
    print(f"👀 Total topic views: {summary.total_topic_views:,}")
    print(f"🔎 Total searches: {summary.total_searches:,}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
