"""
HTML Input Package.

This package parses markup fragments into the node tree consumed by the
JSX builder.
"""

from html_to_jsx.core.html.nodes import Comment, DocumentFragment, DocumentType, Element, Node, Text
from html_to_jsx.core.html.parser import HtmlFragmentParser, parse_fragment

__all__ = [
  "Comment",
  "DocumentFragment",
  "DocumentType",
  "Element",
  "Node",
  "Text",
  "HtmlFragmentParser",
  "parse_fragment",
]
