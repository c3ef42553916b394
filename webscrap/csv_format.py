"""CSV output: a header row of column names, then one row per element."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from webscrap.dom import Element, parse_element
from webscrap.options import StorageOptions, column_order

_CELLS: dict[str, Callable[[Element], str]] = {
    "tag": lambda element: element.name,
    "class": lambda element: " ".join(element.classes),
    "id": lambda element: element.id or "",
    "text": lambda element: element.child_text(),
}


def _cell(element: Element, column: str) -> str:
    render = _CELLS.get(column)
    if render is not None:
        return render(element)
    return element.attributes.get(column) or ""


def csv_lines(data: list[str], options: StorageOptions) -> Iterator[str]:
    """Yield the header line and then one line per scraped element.

    Cells are joined with ``options.delimiter`` without quoting; missing
    values become empty cells. Each line ends with a newline.
    """
    columns = column_order(data, options)
    join = options.delimiter.join
    yield join(columns) + "\n"
    for element in map(parse_element, data):
        yield join([_cell(element, column) for column in columns]) + "\n"