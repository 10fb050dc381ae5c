"""Loading the input URL list."""

from __future__ import annotations

import json
from pathlib import Path

from refinery.errors import UrlListError


def load_urls(path: Path) -> list[str]:
    """Read a JSON array of URL strings from *path*.

    Order is preserved and duplicates are kept.

    Raises:
        UrlListError: If the file is missing or unreadable, is not valid
            JSON, is not an array, is empty, or contains non-string items.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise UrlListError(f"Cannot read URL list {str(path)!r}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise UrlListError(f"URL list {str(path)!r} is not valid JSON: {exc}") from exc

    if not isinstance(data, list) or not data:
        raise UrlListError(f"No links found in {str(path)!r}; expected a non-empty JSON array.")

    bad = [item for item in data if not isinstance(item, str)]
    if bad:
        raise UrlListError(f"URL list {str(path)!r} contains non-string entries: {bad[:3]!r}")

    return list(data)
