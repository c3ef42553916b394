"""XML output: a declaration, then one ``<data>`` record per scraped element."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from webscrap.dom import Element, parse_element
from webscrap.options import StorageOptions, column_order

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def xml_lines(data: list[str], options: StorageOptions) -> Iterator[str]:
    """Yield the XML declaration and then one ``<data>`` chunk per element.

    Values are written as they are, without escaping. With ``pretty_print``
    every line starts on a new line, indented by two spaces per level; a
    field the element lacks then still leaves an indented blank line.
    """
    pretty = options.pretty_print

    def line(text: str, depth: int) -> str:
        return "\n" + "  " * depth + text if pretty else text

    def classes(element: Element) -> str:
        items = "".join(line(f"<class>{name}</class>", 2) for name in element.classes)
        return "<classes>" + items + line("</classes>", 1)

    renderers: dict[str, Callable[[Element], str]] = {
        "tag": lambda element: f"<tag>{element.name}</tag>",
        "class": classes,
        "id": lambda element: "" if element.id is None else f"<id>{element.id}</id>",
        "text": lambda element: f"<text>{element.child_text()}</text>",
    }

    def field(element: Element, column: str) -> str:
        if column in renderers:
            return renderers[column](element)
        if column not in element.attributes:
            return ""
        return f"<{column}>{element.attributes[column] or ''}</{column}>"

    columns = column_order(data, options)
    yield XML_DECLARATION
    for element in map(parse_element, data):
        body = "".join(line(field(element, column), 1) for column in columns)
        yield line("<data>", 0) + body + line("</data>", 0)