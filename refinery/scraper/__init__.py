"""Scraper package — web fetch & HTML-to-markdown conversion."""

from refinery.scraper.converter import html_to_markdown
from refinery.scraper.fetcher import fetch_url
from refinery.scraper.models import ExtractionResult, RawPage

__all__ = ["fetch_url", "html_to_markdown", "RawPage", "ExtractionResult"]
