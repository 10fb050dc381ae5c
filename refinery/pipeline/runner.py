"""Sequential batch runner.

``run_pipeline`` is the single public function in this module.  It loads
the URL list, pushes every URL through the :class:`Extractor` one at a time,
records each outcome in a :class:`RunReport`, and writes the report once at
the end.
"""

from __future__ import annotations

import time
from typing import Callable

from refinery.cleaner.client import MarkdownCleaner
from refinery.config import Settings
from refinery.errors import ExtractionError
from refinery.pipeline.extractor import Extractor
from refinery.pipeline.report import RunReport, format_summary, write_report
from refinery.pipeline.urls import load_urls


def run_pipeline(
    config: Settings,
    cleaner: MarkdownCleaner | None = None,
    wait: Callable[[float], None] = time.sleep,
) -> RunReport:
    """Process every URL in ``config.links_file`` and write the run report.

    The credential is checked first, then the output directories are
    created, then the URL list is read.  Any of those failing aborts the run
    before a single URL is fetched and no report is written.

    Per-URL failures are caught at the loop boundary and recorded; they never
    stop the run.  ``wait(config.request_delay)`` is called after every URL,
    including failures and the last one.

    Args:
        config: Resolved settings for this run.
        cleaner: Cleaning client; built from *config* when ``None``.
        wait: Blocking delay function.  Tests pass a no-op.

    Returns:
        The final :class:`RunReport` (already written to disk).

    Raises:
        MissingCredentialError: If no cleaner is given and no API key is set.
        UrlListError: If the URL list is missing, malformed or empty.
    """
    if cleaner is None:
        cleaner = MarkdownCleaner(
            api_key=config.require_api_key(),
            model=config.openai_chat_model,
            base_url=config.openai_base_url,
            timeout=config.llm_timeout,
        )

    config.ensure_output_dirs()
    urls = load_urls(config.links_file)

    print(f"[RUN] Processing {len(urls)} link(s) …")
    print(f"[RUN]   raw     : {config.raw_dir}")
    print(f"[RUN]   clean   : {config.clean_dir}")
    print(f"[RUN]   reports : {config.reports_dir}")

    extractor = Extractor.from_settings(config, cleaner)
    report = RunReport(total=len(urls), directories=config.directories())

    for url in urls:
        try:
            result = extractor.extract(url)
        except ExtractionError as exc:
            print(f"[ERROR] {url}: {exc.message}")
            report.add_failure(url, exc.message)
        else:
            report.add_success(result)
        wait(config.request_delay)

    snapshot_path, latest_path = write_report(report, config.reports_dir)
    print(format_summary(report, snapshot_path, latest_path))
    return report
