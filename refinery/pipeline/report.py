"""Run report: per-URL entries, JSON persistence, and the console summary.

JSON shape written to disk::

    {
      "timestamp": "2026-01-01T12:00:00.000Z",
      "total": 2, "successes": 1, "errors": 1,
      "directories": {"raw": "...", "clean": "...", "reports": "..."},
      "details": [
        {"url": "...", "status": "success", "fileName": "...", "cleanSize": 10,
         "rawSize": 40, "compression": "75.0%", "paths": {"raw": "...", "clean": "..."}},
        {"url": "...", "status": "error", "error": "...", "timestamp": "..."}
      ]
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, Union

from refinery.scraper.models import ExtractionResult


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def compression_percent(raw_size: int, clean_size: int) -> float | None:
    """Percentage size reduction from raw to clean, rounded to one decimal.

    Halves round away from zero (``6.25`` -> ``6.3``), not to even.

    Returns ``None`` when *raw_size* is zero; the ratio has no meaning there.
    """
    if raw_size == 0:
        return None
    ratio = Decimal((1 - clean_size / raw_size) * 100)
    return float(ratio.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_compression(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.1f}%"


@dataclass
class SuccessEntry:
    url: str
    file_name: str
    clean_size: int
    raw_size: int
    compression: float | None
    paths: dict[str, str]

    @classmethod
    def from_result(cls, result: ExtractionResult) -> SuccessEntry:
        raw_size = len(result.raw_markdown)
        clean_size = len(result.clean_markdown)
        return cls(
            url=result.source_url,
            file_name=result.file_name,
            clean_size=clean_size,
            raw_size=raw_size,
            compression=compression_percent(raw_size, clean_size),
            paths=result.paths,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "status": "success",
            "fileName": self.file_name,
            "cleanSize": self.clean_size,
            "rawSize": self.raw_size,
            "compression": format_compression(self.compression),
            "paths": dict(self.paths),
        }


@dataclass
class FailureEntry:
    url: str
    error: str
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "status": "error",
            "error": self.error,
            "timestamp": self.timestamp,
        }


ReportEntry = Union[SuccessEntry, FailureEntry]


@dataclass
class RunReport:
    """Aggregate outcome of one pass over the URL list.

    Entries are appended in processing order, which is the input order.
    """

    total: int
    directories: dict[str, str]
    timestamp: str = field(default_factory=utc_timestamp)
    successes: int = 0
    errors: int = 0
    details: list[ReportEntry] = field(default_factory=list)

    def add_success(self, result: ExtractionResult) -> SuccessEntry:
        entry = SuccessEntry.from_result(result)
        self.details.append(entry)
        self.successes += 1
        return entry

    def add_failure(self, url: str, message: str) -> FailureEntry:
        entry = FailureEntry(url=url, error=message)
        self.details.append(entry)
        self.errors += 1
        return entry

    @property
    def success_entries(self) -> list[SuccessEntry]:
        return [e for e in self.details if isinstance(e, SuccessEntry)]

    @property
    def success_rate(self) -> float:
        return (self.successes / self.total) * 100 if self.total else 0.0

    def average_clean_size(self) -> float | None:
        entries = self.success_entries
        if not entries:
            return None
        return sum(e.clean_size for e in entries) / len(entries)

    def average_compression(self) -> float | None:
        """Mean compression over successes that have one (``n/a`` excluded)."""
        values = [e.compression for e in self.success_entries if e.compression is not None]
        if not values:
            return None
        return sum(values) / len(values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "total": self.total,
            "successes": self.successes,
            "errors": self.errors,
            "directories": dict(self.directories),
            "details": [entry.to_dict() for entry in self.details],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


def write_report(report: RunReport, reports_dir: Path) -> tuple[Path, Path]:
    """Write *report* as a timestamped snapshot and as ``report_latest.json``.

    Returns:
        ``(snapshot_path, latest_path)``.
    """
    reports_dir = Path(reports_dir)
    reports_dir.mkdir(parents=True, exist_ok=True)
    stamp = report.timestamp.replace(":", "-").replace(".", "-")
    snapshot_path = reports_dir / f"report_{stamp}.json"
    latest_path = reports_dir / "report_latest.json"

    payload = report.to_json()
    snapshot_path.write_text(payload, encoding="utf-8")
    latest_path.write_text(payload, encoding="utf-8")
    return snapshot_path, latest_path


def format_summary(report: RunReport, snapshot_path: Path, latest_path: Path) -> str:
    """Human-readable end-of-run summary."""
    lines = [
        "",
        "[REPORT] FINAL REPORT",
        f"  Successes    : {report.successes}",
        f"  Errors       : {report.errors}",
        f"  Success rate : {report.success_rate:.1f}%",
        f"  Report       : {snapshot_path}",
        f"  Latest       : {latest_path}",
    ]

    if report.successes > 0:
        avg_size = report.average_clean_size() or 0.0
        avg_compression = report.average_compression()
        lines += [
            "",
            "[REPORT] STATISTICS",
            f"  Average clean doc size : {round(avg_size)} chars",
            f"  Average compression    : {format_compression(avg_compression)}",
        ]
    return "\n".join(lines)
