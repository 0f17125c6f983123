"""Tooling for a Markdown blog corpus: loading, linting and link helpers."""

__version__ = "0.1.0"
