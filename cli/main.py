"""Markdown Refinery CLI — entry-point for all pipeline operations.

Usage:
    python cli/main.py --help

Commands:
    run      → process every URL in the links file and write a report
    extract  → process a single URL
    quality  → structural metrics for a markdown file
    config   → show the resolved settings
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from refinery.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import dataclasses
import json
from typing import NoReturn, Optional

import typer

from refinery.config import Settings, settings
from refinery.errors import ExtractionError, MissingCredentialError, UrlListError

app = typer.Typer(
    name="refinery",
    help="Fetch web pages and refine them into clean markdown.",
    no_args_is_help=True,
)


def _resolve_settings(
    links: Optional[Path] = None,
    output: Optional[Path] = None,
    delay: Optional[float] = None,
) -> Settings:
    """Apply command-line overrides on top of the environment settings."""
    overrides: dict = {}
    if links is not None:
        overrides["links_file"] = links
    if output is not None:
        overrides["output_dir"] = output
    if delay is not None:
        overrides["request_delay"] = delay
    return dataclasses.replace(settings, **overrides)


def _fail(message: str) -> NoReturn:
    typer.echo(f"❌ {message}", err=True)
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Pipeline commands
# ---------------------------------------------------------------------------
@app.command("run")
def run(
    links: Optional[Path] = typer.Option(None, help="JSON file with an array of URLs."),
    output: Optional[Path] = typer.Option(None, help="Base output directory."),
    delay: Optional[float] = typer.Option(None, help="Seconds to wait after each URL."),
) -> None:
    """Process every URL in the links file and write a run report."""
    from refinery.pipeline.runner import run_pipeline

    config = _resolve_settings(links, output, delay)
    try:
        run_pipeline(config)
    except (MissingCredentialError, UrlListError) as exc:
        _fail(str(exc))


@app.command("extract")
def extract(
    url: str = typer.Option(..., help="URL to extract."),
    output: Optional[Path] = typer.Option(None, help="Base output directory."),
) -> None:
    """Fetch, convert and clean a single URL, then print the output paths."""
    from refinery.cleaner.client import MarkdownCleaner
    from refinery.pipeline.extractor import Extractor

    config = _resolve_settings(output=output)
    try:
        api_key = config.require_api_key()
    except MissingCredentialError as exc:
        _fail(str(exc))

    config.ensure_output_dirs()
    cleaner = MarkdownCleaner(
        api_key=api_key,
        model=config.openai_chat_model,
        base_url=config.openai_base_url,
        timeout=config.llm_timeout,
    )
    try:
        result = Extractor.from_settings(config, cleaner).extract(url)
    except ExtractionError as exc:
        _fail(f"Error processing {url}: {exc.message}")

    typer.echo(f"[extract] File name : {result.file_name}")
    typer.echo(f"[extract] Raw       : {result.raw_path} ({len(result.raw_markdown)} chars)")
    typer.echo(f"[extract] Clean     : {result.clean_path} ({len(result.clean_markdown)} chars)")


# ---------------------------------------------------------------------------
# Inspection commands
# ---------------------------------------------------------------------------
@app.command("quality")
def quality(
    path: Path = typer.Argument(..., help="Markdown file to inspect."),
) -> None:
    """Print structural quality metrics for a markdown file as JSON."""
    from refinery.cleaner.quality import markdown_quality

    if not path.is_file():
        _fail(f"No such file: {path}")
    metrics = markdown_quality(path.read_text(encoding="utf-8"))
    typer.echo(json.dumps(metrics.to_dict(), indent=2))


@app.command("config")
def show_config() -> None:
    """Show the resolved settings (API key masked)."""
    data = {
        "openai_api_key": "set" if settings.openai_api_key else "(missing)",
        "openai_base_url": settings.openai_base_url,
        "openai_chat_model": settings.openai_chat_model,
        "links_file": str(settings.links_file),
        "output_dir": str(settings.output_dir),
        "request_timeout": settings.request_timeout,
        "llm_timeout": settings.llm_timeout,
        "request_delay": settings.request_delay,
    }
    for key, value in data.items():
        typer.echo(f"  {key:<18}: {value}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
