"""
setup.py

Packaging metadata and CLI entry point for proofreader.

Version: 1.0.0 - Streaming validation of gzip-compressed delimited files
against per-column type formats, with reproducible sampling, defined
format presets and YAML/environment configuration.
"""
from setuptools import setup, find_packages

setup(
    name="proofreader",
    version="1.0.0",
    packages=find_packages(include=["proofreader", "proofreader.*", "cli", "cli.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "PyYAML",
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
            "proofreader=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
