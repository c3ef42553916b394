"""Custom output: each scraped item is handed to a user-supplied callback."""

from __future__ import annotations

from collections.abc import Iterator

from webscrap.options import StorageOptions


def custom_lines(data: list[str], options: StorageOptions) -> Iterator[str]:
    """Pass each item to ``options.custom_data_storage`` and yield an empty string.

    Nothing is written; the callback, if any, does the storing.
    """
    for item in data:
        if options.custom_data_storage is not None:
            options.custom_data_storage(item)
        yield ""