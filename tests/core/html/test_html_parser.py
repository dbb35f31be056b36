"""
Tests for the HTML Fragment Parser.

Verifies:
1. Element, text and comment nodes in document order.
2. Void elements and the self-closing flag.
3. Forgiving end-tag handling.
4. SVG name adjustment.
5. Declarations and processing instructions.
"""

from html_to_jsx.core.html import parse_fragment
from html_to_jsx.core.html.nodes import Comment, DocumentFragment, DocumentType, Element, Text


def test_simple_element():
  frag = parse_fragment("<h1>Hello World!</h1>")
  assert frag == DocumentFragment([Element("h1", children=[Text("Hello World!")])])


def test_attributes_in_source_order():
  (div,) = parse_fragment('<div id="x" class="a" hidden></div>').children
  assert div.attributes == [("id", "x"), ("class", "a"), ("hidden", "")]


def test_entities_decoded():
  (p,) = parse_fragment('<p title="a &amp; b">x&nbsp;&lt;y</p>').children
  assert p.attributes == [("title", "a & b")]
  assert p.children == [Text("x\xa0<y")]


def test_comment_node():
  frag = parse_fragment("<!-- hi -->")
  assert frag.children == [Comment(" hi ")]


def test_void_elements_take_no_children():
  (h1,) = parse_fragment("<h1>Hello<br>World!</h1>").children
  assert h1.children == [Text("Hello"), Element("br"), Text("World!")]


def test_self_closing_flag_ignored_on_html_elements():
  (div,) = parse_fragment("<div /><span>x</span>").children
  assert div.tag == "div"
  assert div.children == [Element("span", children=[Text("x")])]


def test_unclosed_elements_closed_at_end():
  (ul,) = parse_fragment("<ul><li>a").children
  assert ul.children == [Element("li", children=[Text("a")])]


def test_stray_end_tag_ignored():
  frag = parse_fragment("<p>a</span>b</p>")
  assert frag.children == [Element("p", children=[Text("ab")])]


def test_end_tag_closes_nearest_match():
  frag = parse_fragment("<div><span>a</div>b")
  assert frag.children == [Element("div", children=[Element("span", children=[Text("a")])]), Text("b")]


def test_duplicate_attributes_dropped():
  (a,) = parse_fragment('<a href="1" href="2"></a>').children
  assert a.attributes == [("href", "1")]


def test_svg_names_adjusted():
  (svg,) = parse_fragment('<svg viewbox="0 0 1 1"><lineargradient gradientunits="x"/><path d="M0"/></svg>').children
  assert svg.namespace == "svg"
  assert svg.attributes == [("viewBox", "0 0 1 1")]
  gradient, path = svg.children
  assert gradient.tag == "linearGradient"
  assert gradient.attributes == [("gradientUnits", "x")]
  assert path.namespace == "svg"
  assert path.children == []


def test_svg_names_not_adjusted_outside_svg():
  (div,) = parse_fragment('<div viewbox="1"></div>').children
  assert div.attributes == [("viewbox", "1")]
  assert div.namespace == "html"


def test_foreign_object_children_are_html():
  (svg,) = parse_fragment('<svg><foreignobject><div viewbox="1"></div></foreignobject></svg>').children
  (fo,) = svg.children
  assert fo.tag == "foreignObject"
  (div,) = fo.children
  assert div.namespace == "html"
  assert div.attributes == [("viewbox", "1")]


def test_raw_text_content_kept():
  (script,) = parse_fragment("<script>if (a < b) { x(); }</script>").children
  assert script.children == [Text("if (a < b) { x(); }")]


def test_doctype():
  frag = parse_fragment("<!DOCTYPE html><p>x</p>")
  assert frag.children[0] == DocumentType("html")


def test_processing_instruction_is_comment():
  frag = parse_fragment("<?xml version='1.0'?>")
  assert frag.children == [Comment("?xml version='1.0'?")]


def test_adjacent_text_merged():
  frag = parse_fragment("a &amp; b")
  assert frag.children == [Text("a & b")]


def test_empty_input():
  assert parse_fragment("").children == []
