# pylint: disable=missing-module-docstring
# ruff: noqa

from pathlib import Path

from setuptools import find_packages, setup


def read_long_description() -> str:
    """Return README contents for PyPI description."""
    readme_path = Path(__file__).with_name("README.md")
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else "Support Insights Dashboard"


setup(
    name="support-insights",
    version="0.1.0",
    description="Support & activity dashboard from pasted spreadsheet tables, with Gemini insights",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=find_packages(
        include=[
            "dashboard_engine",
            "dashboard_engine.*",
            "ai_insights",
            "ai_insights.*",
            "support_dashboard",
            "support_dashboard.*",
        ]
    ),
    include_package_data=True,
    install_requires=[
        "pandas>=2.0",
        "httpx>=0.26",
        "pydantic>=2.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "support-dashboard = support_dashboard.cli_entrypoints:dashboard",
            "support-explain = support_dashboard.cli_entrypoints:explain",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
