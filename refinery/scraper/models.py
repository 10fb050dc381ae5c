"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class ExtractionResult:
    """Everything produced for one URL that made it through every stage."""

    source_url: str
    file_name: str
    raw_markdown: str
    clean_markdown: str
    raw_path: Path
    clean_path: Path

    @property
    def paths(self) -> dict[str, str]:
        return {"raw": str(self.raw_path), "clean": str(self.clean_path)}
