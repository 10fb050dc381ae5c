"""Markdown Refinery — fetch web pages and refine them into clean markdown."""

__version__ = "0.1.0"
