from ivigen.dom_model import MarkupNode, TextNode, parse_markup


def test_parse_markup_builds_ordered_tree() -> None:
    nodes = parse_markup('<div class="a b" id="x"><span>1</span>text<br></div>')
    assert nodes == [
        MarkupNode(
            tag="div",
            attributes={"class": "a b", "id": "x"},
            children=(
                MarkupNode(tag="span", attributes={}, children=(TextNode("1"),)),
                TextNode("text"),
                MarkupNode(tag="br"),
            ),
        )
    ]
    assert list(nodes[0].attributes) == ["class", "id"]


def test_parse_markup_valueless_attribute_is_empty_string() -> None:
    (node,) = parse_markup("<input type=checkbox checked disabled>")
    assert dict(node.attributes) == {"type": "checkbox", "checked": "", "disabled": ""}


def test_parse_markup_skips_comments_and_top_level_text() -> None:
    nodes = parse_markup("<!DOCTYPE html>\n  <p><!-- note -->hi</p>\ntrailing<b></b>")
    assert [node.tag for node in nodes] == ["p", "b"]
    assert nodes[0].children == (TextNode("hi"),)


def test_parse_markup_empty_input() -> None:
    assert parse_markup("") == []
    assert parse_markup("   \n") == []
    assert parse_markup("only text") == []


def test_parse_markup_keeps_whitespace_only_text_verbatim() -> None:
    (node,) = parse_markup("<ul>\n    <li>a</li>\n\t \n</ul>")
    assert node.children == (
        TextNode("\n    "),
        MarkupNode(tag="li", children=(TextNode("a"),)),
        TextNode("\n\t \n"),
    )
