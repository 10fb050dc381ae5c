"""HTML → markdown conversion.

Headings come out ATX-style (``# Title``) and ``<pre>`` blocks as fenced
triple-backtick code.  Conversion is best-effort: BeautifulSoup repairs
malformed markup instead of rejecting it.  markdownify walks the tree
recursively, so pathologically deep nesting raises ``RecursionError``.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from markdownify import ATX, markdownify

# Tags whose contents are never readable page text
_DROP_TAGS = ["script", "style", "noscript"]

_BLANK_RUNS = re.compile(r"\n{3,}")


def html_to_markdown(html: str) -> str:
    """Convert an HTML document (or fragment) to markdown."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_DROP_TAGS):
        tag.decompose()

    markdown = markdownify(
        str(soup.body or soup),
        heading_style=ATX,
        bullets="-",
        code_language="",
    )
    return _BLANK_RUNS.sub("\n\n", markdown).strip()
