"""YAML-like output: one ``data:`` block per scraped element."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from webscrap.dom import Element, parse_element
from webscrap.options import StorageOptions, column_order


def _indented(text: str, depth: int) -> str:
    return "\n" + "  " * depth + text


def _classes(element: Element) -> str | None:
    if not element.classes:
        return None
    return "- class: " + "".join(_indented(f"- {name}", 2) for name in element.classes)


def _text(element: Element) -> str | None:
    text = element.child_text()
    return f"- text: {text}" if any(char.isalnum() for char in text) else None


_ENTRIES: dict[str, Callable[[Element], "str | None"]] = {
    "tag": lambda element: f"- tag: {element.name}",
    "class": _classes,
    "id": lambda element: None if element.id is None else f"- id: {element.id}",
    "text": _text,
}


def _entry(element: Element, column: str) -> str | None:
    """Render one list entry of a block, or ``None`` when it is to be left out."""
    if column in _ENTRIES:
        return _ENTRIES[column](element)
    if column not in element.attributes:
        return None
    value = element.attributes[column]
    return f"- {column}: {'null' if value is None else value}"


def yaml_lines(data: list[str], options: StorageOptions) -> Iterator[str]:
    """Yield one ``data:`` block per element, each field on its own indented line.

    Fields an element lacks, an empty class list and text without any
    letter or digit are left out. Attributes without a value are written
    as ``null``. Blocks are separated by newlines and the last one ends
    with a newline; nothing is yielded for empty data.
    """
    columns = column_order(data, options)
    last = len(data) - 1
    for index, element in enumerate(map(parse_element, data)):
        entries = (_entry(element, column) for column in columns)
        block = "data:" + "".join(_indented(entry, 1) for entry in entries if entry is not None)
        yield ("\n" if index else "") + block + ("\n" if index == last else "")