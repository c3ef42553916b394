"""Select HTML elements by tag, id, class, attributes and text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from webscrap.dom import Element, parse_fragment


class FilterType(Enum):
    """How the entries of a filter combine."""

    AND = "and"
    OR = "or"


@dataclass
class TagFilter:
    filter: list[str]


@dataclass
class AttributeFilter:
    filter: list[tuple[str, str]]
    filter_type: FilterType = FilterType.AND


@dataclass
class IdFilter:
    filter: list[str]


@dataclass
class ClassFilter:
    filter: list[str]
    filter_type: FilterType = FilterType.AND


@dataclass
class TextFilter:
    filter: list[str]
    filter_type: FilterType = FilterType.AND


@dataclass
class ScrapeOptions:
    tags: TagFilter
    id_filter: IdFilter | None = None
    class_filter: ClassFilter | None = None
    attributes_include: AttributeFilter | None = None
    attributes_exclude: AttributeFilter | None = None
    text_include: TextFilter | None = None
    text_exclude: TextFilter | None = None


def _combine(filter_type: FilterType, results) -> bool:
    return all(results) if filter_type is FilterType.AND else any(results)


def has_tagname(element: Element | None, tags: TagFilter) -> bool:
    if element is None:
        return False
    return element.name in tags.filter


def has_id(element: Element | None, id_filter: IdFilter) -> bool:
    if element is None or element.id is None:
        return False
    return element.id in id_filter.filter


def has_class(element: Element | None, class_filter: ClassFilter) -> bool:
    if element is None:
        return False
    return _combine(
        class_filter.filter_type,
        (wanted in element.classes for wanted in class_filter.filter),
    )


def _attribute_equals(element: Element, key: str, value: str) -> bool:
    return key in element.attributes and element.attributes[key] == value


def fulfill_attribute_filter(element: Element | None, attributes: AttributeFilter) -> bool:
    """Check attribute pairs; only AND mode treats "id" and "class" specially."""
    if element is None:
        return False
    if attributes.filter_type is FilterType.OR:
        return any(_attribute_equals(element, key, value) for key, value in attributes.filter)

    def matches(key: str, value: str) -> bool:
        lowered = key.lower()
        if lowered == "class":
            return value in element.classes
        if lowered == "id":
            return element.id == value
        return _attribute_equals(element, key, value)

    return all(matches(key, value) for key, value in attributes.filter)


def filter_by_text(element: Element | None, text_filters: TextFilter) -> bool:
    if element is None:
        return False
    return _combine(
        text_filters.filter_type,
        (fragment in element.source for fragment in text_filters.filter),
    )


def _selected(element: Element | None, options: ScrapeOptions) -> bool:
    if options.id_filter is not None and not has_id(element, options.id_filter):
        return False
    if options.class_filter is not None and not has_class(element, options.class_filter):
        return False
    if not has_tagname(element, options.tags):
        return False
    if options.attributes_include is not None and not fulfill_attribute_filter(
        element, options.attributes_include
    ):
        return False
    if options.attributes_exclude is not None and fulfill_attribute_filter(
        element, options.attributes_exclude
    ):
        return False
    if options.text_include is not None and not filter_by_text(element, options.text_include):
        return False
    if options.text_exclude is not None and filter_by_text(element, options.text_exclude):
        return False
    return True


def scrape(raw_html: str, options: ScrapeOptions) -> list[str]:
    """Return the source text of every element that passes all filters.

    Top-level nodes are visited in order; each is walked depth first with
    the children of an element taken from last to first.
    """
    results: list[str] = []
    for top in parse_fragment(raw_html):
        pending = [top]
        while pending:
            node = pending.pop()
            element = node if isinstance(node, Element) else None
            if element is not None:
                pending.extend(element.children)
            if _selected(element, options):
                results.append(element.source)
    return results