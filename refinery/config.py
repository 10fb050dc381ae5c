"""Centralised settings for the Markdown Refinery.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

The pipeline never reads the module-level ``settings`` itself; the CLI
builds (or reuses) a :class:`Settings` value and passes it down explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from refinery.errors import MissingCredentialError

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Remote cleaning API
    # ------------------------------------------------------------------
    openai_api_key: str = field(
        default_factory=lambda: os.environ.get("OPENAI_API_KEY", "")
    )
    openai_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "OPENAI_BASE_URL", "https://api.openai.com/v1"
        )
    )
    openai_chat_model: str = field(
        default_factory=lambda: os.environ.get("OPENAI_CHAT_MODEL", "gpt-4o-mini")
    )
    llm_timeout: float = field(
        default_factory=lambda: float(os.environ.get("LLM_TIMEOUT", "120.0"))
    )

    # ------------------------------------------------------------------
    # Input / output locations
    # ------------------------------------------------------------------
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("REFINERY_OUTPUT_DIR", "output"))
    )
    links_file: Path = field(
        default_factory=lambda: Path(
            os.environ.get("REFINERY_LINKS_FILE", "linksExtractor.json")
        )
    )

    # ------------------------------------------------------------------
    # Scraper
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    request_delay: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_DELAY", "1.0"))
    )

    @property
    def raw_dir(self) -> Path:
        """Directory for markdown straight out of the HTML converter."""
        return self.output_dir / "raw"

    @property
    def clean_dir(self) -> Path:
        """Directory for markdown returned by the cleaning API."""
        return self.output_dir / "clean"

    @property
    def reports_dir(self) -> Path:
        return self.output_dir / "reports"

    def directories(self) -> dict[str, str]:
        """The three output roots, as recorded in the run report."""
        return {
            "raw": str(self.raw_dir),
            "clean": str(self.clean_dir),
            "reports": str(self.reports_dir),
        }

    def ensure_output_dirs(self) -> None:
        """Create the raw/clean/reports directories if they do not exist."""
        for directory in (self.raw_dir, self.clean_dir, self.reports_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def require_api_key(self) -> str:
        """Return the API key or raise :class:`MissingCredentialError`."""
        if not self.openai_api_key:
            raise MissingCredentialError(
                "OPENAI_API_KEY environment variable is not set. "
                "Add it to your environment or to the .env file."
            )
        return self.openai_api_key


# Module-level singleton, the CLI's default configuration:
#   from refinery.config import settings
settings = Settings()
