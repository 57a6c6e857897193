#!/usr/bin/env python3
"""Console-script wrappers for the support dashboard scripts.

After an editable install (``pip install -e .``) the following commands become
available system-wide:

* ``support-dashboard`` – build the dashboard from TSV tables (``--sample`` for a demo)
* ``support-explain``   – explain one or more topics with Gemini

The functions below simply forward to the existing scripts so there is no
business-logic duplication. Command-line arguments are passed through.
"""
from __future__ import annotations

import sys
from pathlib import Path
from subprocess import CalledProcessError, run

PYTHON = sys.executable
ROOT = Path(__file__).resolve().parents[1]  # Repository root


def _exec(script: str) -> None:  # noqa: WPS421 (subprocess wrapper)
    """Run *script* with the current arguments and propagate its exit status."""
    try:
        run([PYTHON, str(ROOT / "scripts" / script), *sys.argv[1:]], check=True)
    except CalledProcessError as e:
        sys.exit(e.returncode)


# ---------------------------------------------------------------------------
# Entry-points
# ---------------------------------------------------------------------------

def dashboard() -> None:
    """Build the dashboard (Markdown, HTML, CSV exports)."""
    _exec("build_dashboard.py")


def explain() -> None:
    """Explain topics for a beginner developer."""
    _exec("explain_topic.py")
