"""Deterministic output file names derived from source URLs."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def file_name_for(url: str) -> str:
    """Return the base file name (no extension) used for *url*'s outputs.

    The name is the hostname followed by the path with trailing slashes
    removed and every character outside ``[A-Za-z0-9_-]`` replaced by ``_``.
    A bare host (or root path) gets an ``_index`` suffix::

        https://example.com/           -> example.com_index
        https://example.com/docs/page  -> example.com_docs_page

    Distinct URLs can map to the same name (e.g. ``/a-b`` and ``/a_b``, or
    URLs differing only in query string); their files overwrite each other.
    """
    parts = urlsplit(url)
    hostname = parts.hostname or ""
    name = hostname + _UNSAFE_CHARS.sub("_", parts.path.rstrip("/"))
    if not name or name == hostname:
        name += "_index"
    return name
