"""JSON output: an array holding one object per scraped element."""

from __future__ import annotations

from collections.abc import Iterator

from webscrap.dom import Element, parse_element
from webscrap.options import StorageOptions, column_order


def _field(element: Element, column: str, pretty: bool) -> str | None:
    """Render one ``"key":value`` pair, or ``None`` when the element lacks it."""
    if column == "tag":
        return f'"{column}":"{element.name}"'
    if column == "class":
        separator = ", " if pretty else ","
        classes = separator.join(f'"{name}"' for name in element.classes)
        return f'"{column}":[{classes}]'
    if column == "id":
        if element.id is None:
            return None
        return f'"{column}":"{element.id}"'
    if column == "text":
        return f'"{column}":"{element.child_text()}"'
    if column not in element.attributes:
        return None
    value = element.attributes[column] or ""
    return f'"{column}":"{value}"'


def json_lines(data: list[str], options: StorageOptions) -> Iterator[str]:
    """Yield the opening bracket, one chunk per element, then the closing bracket.

    Values are written as they are, without escaping. Fields an element does
    not have are left out. With ``pretty_print`` every line starts on a new
    line, indented by two spaces per level.
    """
    order = column_order(data, options)
    pretty = options.pretty_print

    def line(text: str, depth: int) -> str:
        return "\n" + "  " * depth + text if pretty else text

    yield "["
    last = len(data) - 1
    for index, raw in enumerate(data):
        element = parse_element(raw)
        parts = [line("{", 1)]
        for position, column in enumerate(order):
            rendered = _field(element, column, pretty)
            if rendered is None:
                continue
            if position > 0:
                parts.append(",")
            parts.append(line(rendered, 2))
        parts.append(line("}" + ("," if index < last else ""), 1))
        yield "".join(parts)
    yield line("]", 0)