import pytest

from saba.dom import (
    Attribute,
    Document,
    Element,
    ElementKind,
    Node,
    Text,
    Window,
    convert_dom_to_string,
    get_element_by_id,
    get_js_content,
    get_style_content,
    get_target_element_node,
)
from saba.errors import UnexpectedInputError


def _append(parent, child):
    children = list(parent.children())
    if children:
        children[-1].next_sibling = child
        child.previous_sibling = children[-1]
    else:
        parent.first_child = child
    parent.last_child = child
    child.parent = parent
    return child


def _element(tag, **attrs):
    attributes = [Attribute(name, value) for name, value in attrs.items()]
    return Node(Element(ElementKind.from_name(tag), attributes))


def _page():
    window = Window()
    document = window.document
    html = _append(document, _element("html"))
    head = _append(html, _element("head"))
    style = _append(head, _element("style"))
    _append(style, Node(Text("p { color: red; }")))
    body = _append(html, _element("body"))
    p = _append(body, _element("p", id="first"))
    _append(p, Node(Text("hello")))
    a = _append(body, _element("a", id="link", href="http://example.com"))
    _append(a, Node(Text("link")))
    script = _append(body, _element("script"))
    _append(script, Node(Text("var a=42;")))
    return document


def test_attribute_add_char():
    attr = Attribute()
    for c in "foo":
        attr.add_char(c, True)
    for c in "bar":
        attr.add_char(c, False)
    assert attr == Attribute("foo", "bar")


@pytest.mark.parametrize("kind", list(ElementKind))
def test_element_kind_name_round_trip(kind):
    assert ElementKind.from_name(str(kind)) is kind


def test_unknown_element_name_raises():
    with pytest.raises(UnexpectedInputError):
        ElementKind.from_name("div")


def test_get_attribute():
    element = Element(ElementKind.A, [Attribute("href", "http://example.com")])
    assert element.get_attribute("href") == "http://example.com"
    assert element.get_attribute("id") is None


@pytest.mark.parametrize(
    "kind, block",
    [
        (ElementKind.BODY, True),
        (ElementKind.H1, True),
        (ElementKind.H2, True),
        (ElementKind.P, True),
        (ElementKind.A, False),
        (ElementKind.HTML, False),
    ],
)
def test_is_block_element(kind, block):
    assert Element(kind).is_block_element() is block


def test_node_equality_compares_kinds():
    assert Node(Document()) == Node(Document())
    assert Node(Text("a")) == Node(Text("b"))
    assert _element("p", id="x") == _element("p")
    assert _element("p") != _element("a")
    assert Node(Document()) != Node(Text("a"))


def test_node_element_accessors():
    node = _element("h1")
    assert node.element_kind() is ElementKind.H1
    assert node.get_element() == Element(ElementKind.H1, [])
    text = Node(Text("x"))
    assert text.get_element() is None
    assert text.element_kind() is None


def test_window_document():
    window = Window()
    assert window.document == Node(Document())
    assert window.document.window is window


def test_children_order():
    document = _page()
    html = document.first_child
    kinds = [child.element_kind() for child in html.children()]
    assert kinds == [ElementKind.HEAD, ElementKind.BODY]


def test_get_element_by_id():
    document = _page()
    found = get_element_by_id(document, "link")
    assert found.element_kind() is ElementKind.A
    assert found.get_element().get_attribute("href") == "http://example.com"
    assert get_element_by_id(document, "missing") is None
    assert get_element_by_id(None, "link") is None


def test_get_target_element_node():
    document = _page()
    body = get_target_element_node(document, ElementKind.BODY)
    assert body.element_kind() is ElementKind.BODY
    assert body.parent.element_kind() is ElementKind.HTML
    assert get_target_element_node(document, ElementKind.H2) is None


def test_style_and_js_content():
    document = _page()
    assert get_style_content(document) == "p { color: red; }"
    assert get_js_content(document) == "var a=42;"


def test_content_missing_is_empty():
    document = Window().document
    _append(document, _element("html"))
    assert get_style_content(document) == ""
    assert get_js_content(document) == ""


def test_convert_dom_to_string_empty():
    assert convert_dom_to_string(None) == "\n"