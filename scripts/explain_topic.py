#!/usr/bin/env python3
"""
Explain support topics for beginner developers using Gemini.

Usage
-----
python scripts/explain_topic.py "403 error occurs when pushing"
python scripts/explain_topic.py "I can't push" "pip" "Access Token"

Each topic is an independent request; they are sent concurrently.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ai_insights.analysis_pipeline import AnalysisPipeline
from ai_insights.gemini_client import GeminiClient

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def explain_all(topics: List[str]) -> List[str]:
    async with GeminiClient() as client:
        pipeline = AnalysisPipeline(client)
        return await asyncio.gather(*(pipeline.explain(topic) for topic in topics))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Explain support topics with AI")
    parser.add_argument("topics", nargs="+", help="Topic or error message to explain")
    args = parser.parse_args(argv)

    explanations = asyncio.run(explain_all(args.topics))

    for topic, explanation in zip(args.topics, explanations):
        print(f'\n✨ Topic: "{topic}"\n')
        print(explanation)

    return 1 if any(text.startswith("Error: ") for text in explanations) else 0


if __name__ == "__main__":
    sys.exit(main())
