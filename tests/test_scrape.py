import pytest

from webscrap.dom import parse_element
from webscrap.scrape import (
    AttributeFilter,
    ClassFilter,
    FilterType,
    IdFilter,
    ScrapeOptions,
    TagFilter,
    TextFilter,
    filter_by_text,
    fulfill_attribute_filter,
    has_class,
    has_id,
    has_tagname,
    scrape,
)

AND, OR = FilterType.AND, FilterType.OR

LOREM = (
    "<div>Occaecat ex minim tempor fugiat. Laborum consectetur ut et qui anim "
    "nostrud cupidatat tempor id sint eu cupidatat.</div>"
)
CLASSES = "<div class='test city note logo animal fruit'></div>"
HEIGHT_WIDTH = "<div height='test' width='test'></div>"
ID_AND_CLASS = "<div id='test_id' class='test_class'></div>"


def _html(tag, classes, ident, role, text):
    return f"<{tag} class='{classes}' id='{ident}' data-role='{role}'>{text}</{tag}>"


ITEMS = [
    _html("div", "test", "div1", "main", "hello world"),
    _html("span", "test", "span1", "secondary", "hello rust"),
    _html("div", "test", "div2", "main", "goodbye world"),
    _html("div", "example", "div3", "main", "hello universe"),
    _html("span", "example", "span2", "secondary", "goodbye rust"),
]
RAW_HTML = "\n" + "\n".join(ITEMS) + "\n"


@pytest.mark.parametrize(
    "predicate, html, passing, failing",
    [
        pytest.param(has_tagname, "<div></div>", TagFilter(["div"]), TagFilter(["fail"]), id="tagname"),
        pytest.param(has_id, "<div id='test'></div>", IdFilter(["test"]), IdFilter(["fail"]), id="id"),
        pytest.param(
            has_class,
            CLASSES,
            ClassFilter(["test", "city", "animal"], AND),
            ClassFilter(["test", "city", "fail"], AND),
            id="class_and",
        ),
        pytest.param(
            has_class,
            CLASSES,
            ClassFilter(["test", "fail", "animal"], OR),
            ClassFilter(["giorno", "log", "fail"], OR),
            id="class_or",
        ),
        pytest.param(
            fulfill_attribute_filter,
            HEIGHT_WIDTH,
            AttributeFilter([("height", "test"), ("width", "test")], AND),
            AttributeFilter([("height", "fail"), ("width", "test")], AND),
            id="attribute_and",
        ),
        pytest.param(
            fulfill_attribute_filter,
            HEIGHT_WIDTH,
            AttributeFilter([("height", "fail"), ("width", "test")], OR),
            AttributeFilter([("height", "null"), ("width", "void")], OR),
            id="attribute_or",
        ),
        pytest.param(
            fulfill_attribute_filter,
            ID_AND_CLASS,
            AttributeFilter([("id", "test_id")], AND),
            AttributeFilter([("id", "wrong_id")], AND),
            id="attribute_id",
        ),
        pytest.param(
            fulfill_attribute_filter,
            ID_AND_CLASS,
            AttributeFilter([("class", "test_class")], AND),
            AttributeFilter([("class", "wrong_class")], AND),
            id="attribute_class",
        ),
        pytest.param(
            filter_by_text,
            LOREM,
            TextFilter(["qui anim", "id sint eu cupidatat"], AND),
            TextFilter(["minim", "consetur"], AND),
            id="text_and",
        ),
        pytest.param(
            filter_by_text,
            LOREM,
            TextFilter(["adsfasdfasd", "cupidatat tempor"], OR),
            TextFilter(["burip", "consetur"], OR),
            id="text_or",
        ),
    ],
)
def test_predicate_accepts_and_rejects(predicate, html, passing, failing):
    element = parse_element(html)
    assert predicate(element, passing)
    assert not predicate(element, failing)


@pytest.mark.parametrize(
    "predicate, html, criterion",
    [
        pytest.param(has_tagname, None, TagFilter(["div"]), id="no_element"),
        pytest.param(has_id, "<div></div>", IdFilter(["test"]), id="no_id"),
        pytest.param(
            fulfill_attribute_filter,
            "<div id='test_id'></div>",
            AttributeFilter([("id", "test_id")], OR),
            id="or_ignores_id",
        ),
    ],
)
def test_predicate_rejects(predicate, html, criterion):
    element = None if html is None else parse_element(html)
    assert not predicate(element, criterion)


@pytest.mark.parametrize(
    "options, expected",
    [
        pytest.param(
            ScrapeOptions(tags=TagFilter(["div"]), class_filter=ClassFilter(["test"], AND)),
            [0, 2],
            id="tag_and_class",
        ),
        pytest.param(
            ScrapeOptions(tags=TagFilter(["span"]), id_filter=IdFilter(["span1"])),
            [1],
            id="tag_and_id",
        ),
        pytest.param(
            ScrapeOptions(tags=TagFilter(["div", "span"]), text_include=TextFilter(["hello"], OR)),
            [0, 1, 3],
            id="text_include",
        ),
        pytest.param(
            ScrapeOptions(
                tags=TagFilter(["div"]),
                attributes_include=AttributeFilter([("data-role", "main")], AND),
            ),
            [0, 2, 3],
            id="attribute_include",
        ),
        pytest.param(
            ScrapeOptions(
                tags=TagFilter(["div"]),
                id_filter=IdFilter(["div1", "div2"]),
                class_filter=ClassFilter(["test"], AND),
                text_include=TextFilter(["world"], OR),
            ),
            [0, 2],
            id="multiple_criteria",
        ),
        pytest.param(
            ScrapeOptions(
                tags=TagFilter(["div", "span"]),
                attributes_exclude=AttributeFilter([("data-role", "main")], AND),
                text_exclude=TextFilter(["goodbye"], OR),
            ),
            [1],
            id="excludes",
        ),
    ],
)
def test_scrape(options, expected):
    assert scrape(RAW_HTML, options) == [ITEMS[position] for position in expected]


def test_scrape_visits_children_last_first():
    raw = "<div><span>a</span><span>b</span></div>"
    options = ScrapeOptions(tags=TagFilter(["div", "span"]))
    assert scrape(raw, options) == [raw, "<span>b</span>", "<span>a</span>"]