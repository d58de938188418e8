"""
setup.py

Packaging metadata and CLI entry point for content-preflight.

Version: 1.0.0: rule engine for articles, books and chapters with a
click-based `check` command, YAML configuration and JSON reports.
"""
from setuptools import setup, find_packages

setup(
    name="content-preflight",
    version="1.0.0",
    packages=find_packages(include=["preflight", "preflight.*", "cli", "cli.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "pyyaml",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "content-preflight=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
