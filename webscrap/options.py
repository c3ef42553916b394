"""Storage options shared by the output formats, and the column order they use."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from webscrap.dom import parse_element


class FileFormat(Enum):
    """Output formats that scraped data can be stored in."""

    TXT = "txt"
    JSON = "json"
    CSV = "csv"
    XML = "xml"
    YAML = "yaml"
    CUSTOM = "custom"


@dataclass
class StorageOptions:
    """How scraped elements are written out.

    ``include_attributes`` and ``include_tag_names`` only matter when
    ``include_tag_content`` is true. ``include_attributes`` of ``None`` means
    every attribute found in the data. ``delimiter`` is used by CSV,
    ``pretty_print`` by JSON and XML, and ``custom_data_storage`` by the
    custom format, where it receives each scraped item.
    """

    file_name: str
    file_format: FileFormat = FileFormat.TXT
    include_tag_content: bool = False
    include_attributes: list[str] | None = None
    include_text_content: bool = True
    include_tag_names: bool = True
    pretty_print: bool = False
    delimiter: str = ","
    custom_data_storage: Callable[[str], object] | None = None


def discover_attributes(data: Iterable[str]) -> list[str]:
    """Collect the attribute names used by the given elements, first seen first.

    ``id`` and ``class`` are included when any element has them.
    """
    seen: dict[str, None] = {}
    for raw in data:
        element = parse_element(raw)
        if element.id is not None:
            seen.setdefault("id")
        if element.classes:
            seen.setdefault("class")
        for key in element.attributes:
            seen.setdefault(key)
    return list(seen)


def column_order(data: list[str], options: StorageOptions) -> list[str]:
    """Return the fields each stored record holds, in output order.

    Without tag content only ``text`` is kept; otherwise the tag name (if
    wanted), the chosen or discovered attributes, and finally ``text``.
    """
    if not options.include_tag_content:
        return ["text"]
    order: list[str] = []
    if options.include_tag_names:
        order.append("tag")
    if options.include_attributes is not None:
        order.extend(options.include_attributes)
    else:
        order.extend(discover_attributes(data))
    order.append("text")
    return order