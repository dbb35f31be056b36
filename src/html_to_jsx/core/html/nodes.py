"""
Markup Tree Nodes.

Defines the tree produced by ``HtmlFragmentParser``:
- Element: a tag with ordered attributes and children.
- Text: decoded character data (raw for script/style contents).
- Comment: the data between ``<!--`` and ``-->``.
- DocumentType: a ``<!DOCTYPE ...>`` declaration.
- DocumentFragment: the root container for the parsed top-level nodes.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Union

Attribute = Tuple[str, str]


@dataclass
class Text:
  value: str


@dataclass
class Comment:
  value: str


@dataclass
class DocumentType:
  name: str = "html"


@dataclass
class Element:
  """
  A markup element.

  Attributes:
      tag: Tag name, lower-cased for HTML and canonically cased for SVG.
      attributes: ``(name, value)`` pairs in source order.
      children: Child nodes in source order.
      namespace: ``html``, ``svg`` or ``math``.
  """

  tag: str
  attributes: List[Attribute] = field(default_factory=list)
  children: List["Node"] = field(default_factory=list)
  namespace: str = "html"


Node = Union[Element, Text, Comment, DocumentType]


@dataclass
class DocumentFragment:
  children: List[Node] = field(default_factory=list)
