"""Single-URL extraction: fetch → convert → clean → persist.

Stages run strictly in order and the first failure ends the attempt for that
URL.  Files are only written after the cleaning call succeeds, so a failed
URL leaves nothing behind in the raw or clean directories; a failed clean-file
write also removes the raw file written just before it.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from refinery.cleaner.client import MarkdownCleaner
from refinery.config import Settings
from refinery.errors import CleanerError, ExtractionError
from refinery.pipeline.naming import file_name_for
from refinery.scraper.converter import html_to_markdown
from refinery.scraper.fetcher import fetch_url
from refinery.scraper.models import ExtractionResult


class Extractor:
    """Turns one URL into a raw and a cleaned markdown file."""

    def __init__(
        self,
        cleaner: MarkdownCleaner,
        raw_dir: Path,
        clean_dir: Path,
        request_timeout: float = 30.0,
    ) -> None:
        self.cleaner = cleaner
        self.raw_dir = Path(raw_dir)
        self.clean_dir = Path(clean_dir)
        self.request_timeout = request_timeout

    @classmethod
    def from_settings(cls, config: Settings, cleaner: MarkdownCleaner) -> Extractor:
        return cls(
            cleaner=cleaner,
            raw_dir=config.raw_dir,
            clean_dir=config.clean_dir,
            request_timeout=config.request_timeout,
        )

    def extract(self, url: str) -> ExtractionResult:
        """Run every stage for *url* and return the :class:`ExtractionResult`.

        Raises:
            ExtractionError: Wrapping whichever stage failed; the message
                names the stage and includes the underlying cause.
        """
        # ------------------------------------------------------------------
        # 1. Fetch
        # ------------------------------------------------------------------
        print(f"[EXTRACT] Fetching {url}")
        try:
            raw_page = fetch_url(url, timeout=self.request_timeout)
        except httpx.HTTPError as exc:
            raise ExtractionError(url, f"Fetch failed: {exc}") from exc

        # ------------------------------------------------------------------
        # 2. Convert
        # ------------------------------------------------------------------
        try:
            raw_markdown = html_to_markdown(raw_page.html)
        except (RecursionError, ValueError) as exc:
            raise ExtractionError(url, f"Convert failed: {exc!r}") from exc

        # ------------------------------------------------------------------
        # 3. Remote clean
        # ------------------------------------------------------------------
        print(f"[CLEAN] Restructuring with {self.cleaner.model} …")
        try:
            clean_markdown = self.cleaner.clean(raw_markdown, url)
        except CleanerError as exc:
            raise ExtractionError(url, str(exc)) from exc

        # ------------------------------------------------------------------
        # 4. Persist (overwrites any previous output for the same name)
        # ------------------------------------------------------------------
        file_name = file_name_for(url)
        raw_path = self.raw_dir / f"{file_name}.md"
        clean_path = self.clean_dir / f"{file_name}.md"
        try:
            raw_path.write_text(raw_markdown, encoding="utf-8")
            clean_path.write_text(clean_markdown, encoding="utf-8")
        except OSError as exc:
            raw_path.unlink(missing_ok=True)
            raise ExtractionError(url, f"Could not write output files: {exc}") from exc

        print(f"[SAVE] Raw markdown   → {raw_path}")
        print(f"[SAVE] Clean markdown → {clean_path}")

        return ExtractionResult(
            source_url=url,
            file_name=file_name,
            raw_markdown=raw_markdown,
            clean_markdown=clean_markdown,
            raw_path=raw_path,
            clean_path=clean_path,
        )
