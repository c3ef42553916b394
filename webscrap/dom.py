"""A small, forgiving HTML parser that keeps the source text of each element."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Union

_VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr",
    }
)
_RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

_TAG_OPEN = re.compile(r"<([A-Za-z][^\s/>]*)")
_TAG_END = re.compile(r"\s*(/?)>")
_ATTRIBUTE = re.compile(
    r"""\s*([^\s"'>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+)))?"""
)
_CLOSE_START = re.compile(r"</\s*[A-Za-z]")
_CLOSE = re.compile(r"</\s*([A-Za-z][^\s/>]*)\s*>")


@dataclass
class _Comment:
    text: str


@dataclass
class Element:
    """An HTML element with its attributes, children and original source text."""

    name: str
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, str | None] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    source: str = ""

    def child_text(self) -> str:
        """Join the direct text children with spaces; other children count as empty."""
        return " ".join(child if isinstance(child, str) else "" for child in self.children)


Node = Union[Element, str, _Comment]


def _is_markup(raw: str, pos: int) -> bool:
    return (
        raw.startswith(("<!", "<?"), pos)
        or _TAG_OPEN.match(raw, pos) is not None
        or _CLOSE_START.match(raw, pos) is not None
    )


def _add_text(children: List[Node], text: str) -> None:
    stripped = text.strip()
    if stripped:
        children.append(stripped)


def _build_element(name: str, raw_attributes: list[tuple[str, str | None]]) -> Element:
    element = Element(name=name)
    for key, value in raw_attributes:
        lowered = key.lower()
        if lowered == "id":
            if element.id is None:
                element.id = value or ""
        elif lowered == "class":
            if not element.classes:
                element.classes = (value or "").split()
        else:
            element.attributes.setdefault(key, value)
    return element


def parse_fragment(raw_html: str) -> list[Node]:
    """Parse HTML into its top-level nodes (elements, text strings and comments).

    Raises ValueError for a closing tag with no open element to match, an
    unterminated comment or declaration, or a malformed start tag.
    """
    roots: list[Node] = []
    open_elements: list[tuple[Element, int]] = []

    def current_children() -> List[Node]:
        return open_elements[-1][0].children if open_elements else roots

    pos = 0
    length = len(raw_html)
    while pos < length:
        scan = pos
        while True:
            lt = raw_html.find("<", scan)
            if lt == -1:
                lt = length
                break
            if _is_markup(raw_html, lt):
                break
            scan = lt + 1
        _add_text(current_children(), raw_html[pos:lt])
        pos = lt
        if pos >= length:
            break

        if raw_html.startswith("<!--", pos):
            end = raw_html.find("-->", pos + 4)
            if end == -1:
                raise ValueError(f"unterminated comment at offset {pos}")
            current_children().append(_Comment(raw_html[pos + 4:end]))
            pos = end + 3
            continue

        if raw_html.startswith(("<!", "<?"), pos):
            end = raw_html.find(">", pos)
            if end == -1:
                raise ValueError(f"unterminated declaration at offset {pos}")
            pos = end + 1
            continue

        if raw_html.startswith("</", pos):
            close = _CLOSE.match(raw_html, pos)
            if close is None:
                raise ValueError(f"malformed closing tag at offset {pos}")
            wanted = close.group(1).lower()
            depth = next(
                (
                    index
                    for index in range(len(open_elements) - 1, -1, -1)
                    if open_elements[index][0].name.lower() == wanted
                ),
                None,
            )
            if depth is None:
                raise ValueError(f"unexpected closing tag </{close.group(1)}> at offset {pos}")
            while len(open_elements) > depth + 1:
                element, start = open_elements.pop()
                element.source = raw_html[start:pos]
            element, start = open_elements.pop()
            element.source = raw_html[start:close.end()]
            pos = close.end()
            continue

        opening = _TAG_OPEN.match(raw_html, pos)
        name = opening.group(1)
        cursor = opening.end()
        raw_attributes: list[tuple[str, str | None]] = []
        while True:
            tag_end = _TAG_END.match(raw_html, cursor)
            if tag_end is not None:
                break
            attribute = _ATTRIBUTE.match(raw_html, cursor)
            if attribute is None or attribute.end() == cursor:
                raise ValueError(f"malformed tag <{name}> at offset {pos}")
            value = next((g for g in attribute.group(2, 3, 4) if g is not None), None)
            raw_attributes.append((attribute.group(1), value))
            cursor = attribute.end()

        element = _build_element(name, raw_attributes)
        current_children().append(element)
        lowered = name.lower()
        self_closing = tag_end.group(1) == "/"

        if self_closing or lowered in _VOID_ELEMENTS:
            element.source = raw_html[pos:tag_end.end()]
            pos = tag_end.end()
        elif lowered in _RAW_TEXT_ELEMENTS:
            closer = re.compile(rf"</\s*{re.escape(name)}\s*>", re.IGNORECASE)
            found = closer.search(raw_html, tag_end.end())
            if found is None:
                raise ValueError(f"unterminated <{name}> at offset {pos}")
            _add_text(element.children, raw_html[tag_end.end():found.start()])
            element.source = raw_html[pos:found.end()]
            pos = found.end()
        else:
            open_elements.append((element, pos))
            pos = tag_end.end()

    while open_elements:
        element, start = open_elements.pop()
        element.source = raw_html[start:]
    return roots


def parse_element(raw_html: str) -> Element:
    """Parse HTML whose first node must be an element, and return that element."""
    nodes = parse_fragment(raw_html)
    if not nodes or not isinstance(nodes[0], Element):
        raise ValueError("the HTML does not start with an element")
    return nodes[0]