"""Lightweight structural metrics for a markdown document.

Purely informational.  Nothing in the pipeline consults these numbers to
accept or reject a cleaned document.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass
class QualityMetrics:
    has_main_title: bool
    has_structure: bool
    has_formatting: bool
    has_code: bool
    size: int
    lines: int
    density: float

    def to_dict(self) -> dict:
        return asdict(self)


def markdown_quality(markdown: str) -> QualityMetrics:
    """Compute :class:`QualityMetrics` for *markdown*.

    ``density`` is the number of space-separated words per line.
    """
    line_count = len(markdown.split("\n"))
    return QualityMetrics(
        has_main_title="# " in markdown,
        has_structure="## " in markdown,
        has_formatting="*" in markdown,
        has_code="```" in markdown,
        size=len(markdown),
        lines=line_count,
        density=len(markdown.split(" ")) / line_count,
    )
