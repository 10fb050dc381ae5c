"""Remote markdown cleaning via a chat-completion API."""

from refinery.cleaner.client import MarkdownCleaner
from refinery.cleaner.quality import QualityMetrics, markdown_quality

__all__ = ["MarkdownCleaner", "QualityMetrics", "markdown_quality"]
