"""Tests for output file-name derivation."""

from __future__ import annotations

import pytest

from refinery.pipeline.naming import file_name_for


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://example.com/", "example.com_index"),
        ("https://example.com", "example.com_index"),
        ("https://example.com/docs/page", "example.com_docs_page"),
        ("https://example.com/docs/page/", "example.com_docs_page"),
        ("https://example.com/docs///", "example.com_docs"),
        ("https://example.com/a-b_c/v1.2", "example.com_a-b_c_v1_2"),
        ("https://example.com:8080/x", "example.com_x"),
        ("https://a.test/x", "a.test_x"),
    ],
)
def test_file_name_for(url: str, expected: str) -> None:
    assert file_name_for(url) == expected


def test_deterministic() -> None:
    url = "https://docs.example.org/guide/intro?lang=en"
    assert file_name_for(url) == file_name_for(url)


def test_query_string_is_ignored() -> None:
    assert file_name_for("https://example.com/page?x=1") == "example.com_page"


def test_distinct_urls_can_collide() -> None:
    """Known limitation: sanitisation is lossy and names can clash."""
    assert file_name_for("https://example.com/a.b") == file_name_for("https://example.com/a_b")
