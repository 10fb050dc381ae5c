"""Exception hierarchy for the refinery.

Two severities exist.  :class:`MissingCredentialError` and
:class:`UrlListError` are fatal and abort a run before any URL is processed.
:class:`ExtractionError` is scoped to a single URL; the runner records it in
the report and moves on.
"""

from __future__ import annotations


class RefineryError(Exception):
    """Base class for all refinery errors."""


class MissingCredentialError(RefineryError):
    """The API credential for the cleaning service is not configured."""


class UrlListError(RefineryError):
    """The URL list file is missing, unparsable, not a list, or empty."""


class CleanerError(RefineryError):
    """The remote cleaning call failed (auth, quota, timeout, bad response)."""


class ExtractionError(RefineryError):
    """A single URL failed at one of the fetch/convert/clean/persist stages."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url
        self.message = message
