"""Plain-text output: each scraped element's source, unchanged."""

from __future__ import annotations

from collections.abc import Iterator

from webscrap.options import StorageOptions


def txt_lines(data: list[str], options: StorageOptions) -> Iterator[str]:
    """Yield every scraped item exactly as it was scraped."""
    yield from data