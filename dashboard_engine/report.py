"""Render the results view: Markdown report, self-contained HTML dashboard, CSV exports."""
from __future__ import annotations

import html
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict

import pandas as pd

from .app_state import AppState

logger = logging.getLogger(__name__)

CHART_COLORS = [
    "#6366F1", "#818CF8", "#A5B4FC", "#C7D2FE",
    "#F87171", "#34D399", "#A78BFA", "#FBBF24",
]


def _j(value) -> str:
    """JSON for inlining inside a <script> block."""
    return json.dumps(value, default=str).replace("</", "<\\/")


def _e(text) -> str:
    return html.escape(str(text))


def _md_cell(text: str) -> str:
    """Escape pipes so a value stays inside its Markdown table cell."""
    return text.replace("|", "\\|")


class DashboardReportGenerator:
    """Builds every output of the results view from an analyzed :class:`AppState`."""

    def __init__(self, state: AppState):
        if not state.is_analyzed:
            raise ValueError("Dashboard can only be rendered after a successful analyze")
        self.state = state
        self.summary = state.dashboard_summary
        self.generated_at = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def to_frames(self) -> Dict[str, pd.DataFrame]:
        """Parsed tables as DataFrames, keyed by export file name."""
        state = self.state
        return {
            "keyword_categories.csv": pd.DataFrame(
                [c.model_dump() for c in state.keyword_data], columns=["name", "value"]
            ),
            "trending_searches.csv": pd.DataFrame(
                [r.model_dump() for r in state.trending_data], columns=["term", "searches", "ctr"]
            ),
            "top_topics.csv": pd.DataFrame(
                [t.model_dump() for t in state.topics_data], columns=["topic", "views"]
            ),
        }

    def export_csvs(self, output_dir: Path) -> Dict[str, Path]:
        output_dir.mkdir(parents=True, exist_ok=True)
        paths = {}
        for filename, df in self.to_frames().items():
            path = output_dir / filename
            df.to_csv(path, index=False)
            logger.info(f"Saved {filename} ({len(df)} rows)")
            paths[filename] = path
        return paths

    # ------------------------------------------------------------------
    # Markdown
    # ------------------------------------------------------------------

    def generate_markdown(self) -> str:
        state = self.state
        summary = self.summary
        total_keywords = sum(c.value for c in state.keyword_data)

        markdown = f"""# User Support & Activity Dashboard
*Generated: {self.generated_at}*

An overview of user-reported issues, search trends, and topic engagement.

## Overview
- **#1 Problem Category**: {summary.top_category}
- **Total Topic Views**: {summary.total_topic_views:,}
- **Total Searches**: {summary.total_searches:,}

## Problem Category Breakdown
"""
        if state.keyword_data:
            for category in state.keyword_data:
                share = category.value / total_keywords * 100
                markdown += f"- **{category.name}** - {category.value} keywords ({share:.2f}%)\n"
        else:
            markdown += "*No keyword categories provided.*\n"

        markdown += "\n## Trending Searches\n"
        if state.trending_data:
            markdown += "| Term | Searches | CTR |\n|---|---:|---:|\n"
            for record in state.trending_data:
                markdown += f"| {_md_cell(record.term)} | {record.searches:,} | {record.ctr:.2f}% |\n"
        else:
            markdown += "*No trending searches provided.*\n"

        markdown += "\n## Top Viewed Topics\n"
        if state.topics_data:
            for index, item in enumerate(state.topics_data, 1):
                markdown += f"{index}. {item.topic} - {item.views:,} views\n"
        else:
            markdown += "*No topics provided.*\n"

        if state.summary:
            markdown += f"\n## AI-Powered Analysis\n### Analysis Summary\n{state.summary}\n"
            if state.recommendations:
                markdown += f"\n### Recommendations\n{state.recommendations}\n"

        return markdown

    # ------------------------------------------------------------------
    # HTML
    # ------------------------------------------------------------------

    def generate_html(self) -> str:
        state = self.state
        summary = self.summary

        pie_labels = [c.name for c in state.keyword_data]
        pie_values = [c.value for c in state.keyword_data]
        pie_colors = [CHART_COLORS[i % len(CHART_COLORS)] for i in range(len(pie_values))]
        bar_labels = [r.term for r in state.trending_data]
        bar_values = [r.searches for r in state.trending_data]

        topic_rows = "\n".join(
            f'<li><span class="t">{index}. {_e(item.topic)}</span>'
            f'<span class="v">{item.views:,}</span></li>'
            for index, item in enumerate(state.topics_data, 1)
        ) or '<li class="empty">No topics provided.</li>'

        ai_panel = ""
        if state.summary:
            ai_panel = (
                '<div class="card"><h2>AI-Powered Analysis</h2>'
                f'<div class="summary"><h3>Analysis Summary</h3><p>{_e(state.summary)}</p></div>'
            )
            if state.recommendations:
                ai_panel += (
                    f'<div class="recs"><h3>Recommendations</h3><p>{_e(state.recommendations)}</p></div>'
                )
            ai_panel += "</div>"

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>User Support &amp; Activity Dashboard</title>
  <script src="https://cdn.jsdelivr.net/npm/chart.js@4.4.0/dist/chart.umd.min.js"></script>
  <style>
    body{{font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,sans-serif;background:#f8fafc;color:#1e293b;margin:0;padding:32px}}
    h1{{margin:0 0 4px}} .sub{{color:#64748b;margin:0 0 24px}}
    .kpis{{display:grid;grid-template-columns:repeat(3,1fr);gap:16px;margin-bottom:24px}}
    .card{{background:#fff;border:1px solid #e2e8f0;border-radius:16px;padding:20px}}
    .kpi .label{{color:#64748b;font-size:13px}} .kpi .value{{font-size:24px;font-weight:700}}
    .grid{{display:grid;grid-template-columns:2fr 3fr;gap:24px}}
    ul.topics{{list-style:none;padding:0;margin:0;max-height:240px;overflow-y:auto}}
    ul.topics li{{display:flex;justify-content:space-between;padding:6px 0;font-size:14px}}
    ul.topics .v{{font-weight:700;background:#f1f5f9;padding:2px 8px;border-radius:6px}}
    .summary{{background:#f1f5f9;padding:16px;border-radius:8px;white-space:pre-wrap}}
    .recs{{background:#f0fdf4;border-left:4px solid #4ade80;padding:16px;border-radius:8px;margin-top:16px;white-space:pre-wrap}}
  </style>
</head>
<body>
<h1>User Support &amp; Activity Dashboard</h1>
<p class="sub">An overview of user-reported issues, search trends, and topic engagement. Generated {self.generated_at}.</p>

<div class="kpis">
  <div class="card kpi"><div class="label">#1 Problem Category</div><div class="value">{_e(summary.top_category)}</div></div>
  <div class="card kpi"><div class="label">Total Topic Views</div><div class="value">{summary.total_topic_views:,}</div></div>
  <div class="card kpi"><div class="label">Total Searches</div><div class="value">{summary.total_searches:,}</div></div>
</div>

<div class="grid">
  <div class="card">
    <h2>Problem Category Breakdown</h2>
    <p class="sub">Distribution of keywords by category.</p>
    <canvas id="pieChart"></canvas>
  </div>
  <div>
    {ai_panel}
    <div class="card">
      <h2>Trending Searches</h2>
      <canvas id="barChart"></canvas>
    </div>
    <div class="card">
      <h2>Top Viewed Topics</h2>
      <ul class="topics">
{topic_rows}
      </ul>
    </div>
  </div>
</div>

<script>
new Chart(document.getElementById("pieChart"), {{
  type: "doughnut",
  data: {{labels: {_j(pie_labels)}, datasets: [{{data: {_j(pie_values)}, backgroundColor: {_j(pie_colors)}}}]}},
  options: {{cutout: "60%", plugins: {{tooltip: {{callbacks: {{
    label: (ctx) => {{
      const total = ctx.dataset.data.reduce((a, b) => a + b, 0);
      return `${{ctx.parsed}} keywords (${{(ctx.parsed / total * 100).toFixed(2)}}%)`;
    }}
  }}}}}}}}
}});
new Chart(document.getElementById("barChart"), {{
  type: "bar",
  data: {{labels: {_j(bar_labels)}, datasets: [{{label: "Searches", data: {_j(bar_values)}, backgroundColor: "#FBBF24"}}]}},
  options: {{indexAxis: "y", plugins: {{legend: {{display: false}}}}}}
}});
</script>
</body>
</html>
"""

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def save(self, output_dir: Path) -> Dict[str, Path]:
        """Write the Markdown report, the HTML dashboard and the CSV exports."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        paths = self.export_csvs(output_dir)

        markdown_path = output_dir / "dashboard.md"
        with open(markdown_path, "w", encoding="utf-8") as f:
            f.write(self.generate_markdown())
        paths["dashboard.md"] = markdown_path

        html_path = output_dir / "dashboard.html"
        with open(html_path, "w", encoding="utf-8") as f:
            f.write(self.generate_html())
        paths["dashboard.html"] = html_path

        logger.info(f"Dashboard saved to {output_dir}")
        return paths
