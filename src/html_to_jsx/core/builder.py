"""
Tree-to-Template Builder.

Walks a parsed markup fragment and produces the equivalent JSX tree. Every
markup node maps onto output nodes of the same shape; only the node kind and
the attribute encoding change.

Two shapes are produced for each node:

- **Top level** (``build_statement``): the whole output is one statement. A
  lone element becomes an expression, lone text a string literal, a lone
  comment or merge tag an annotated empty block.
- **Child** (``build_children``): a lazily produced sequence of JSX children.
  Text fans out into one child per literal span and merge tag.

Special cases:
- Comments become empty ``{ /* ... */ }`` slots, never evaluated.
- ``script`` and ``style`` bodies are kept verbatim in a template literal.
- Elements without children are self-closing.
- Document type declarations cannot be represented and fail the conversion.
"""

from typing import Iterator, List, Optional

from html_to_jsx.config import ConverterConfig
from html_to_jsx.core.convert_attributes import convert_attributes
from html_to_jsx.core.exceptions import StructuralError
from html_to_jsx.core.external.entities import encode_text
from html_to_jsx.core.html.nodes import (
  Comment,
  DocumentFragment,
  DocumentType,
  Element,
  Node,
  Text,
)
from html_to_jsx.core.jsx.nodes import (
  CommentBlock,
  ExpressionStatement,
  JsxAttribute,
  JsxElement,
  JsxExpressionSlot,
  JsxFragment,
  JsxNode,
  JsxRawTextElement,
  JsxText,
  StringLiteral,
  TopLevelNode,
)
from html_to_jsx.core.merge_tags import TextPart, split_merge_tags

RAW_TEXT_ELEMENTS = frozenset({"script", "style"})


class JsxBuilder:
  """
  Recursive transducer from markup nodes to JSX nodes.
  """

  def __init__(self, config: Optional[ConverterConfig] = None) -> None:
    self.config = config or ConverterConfig()

  def build(self, fragment: DocumentFragment) -> TopLevelNode:
    """
    Converts a parsed fragment into a single top-level statement.

    A fragment with exactly one node uses that node's top-level form.
    Otherwise all nodes are wrapped in a JSX fragment.

    Args:
        fragment: The parsed markup.

    Returns:
        TopLevelNode: The root statement.

    Raises:
        StructuralError: If the tree contains an unsupported node.
    """
    if len(fragment.children) == 1:
      return self.build_statement(fragment.children[0])

    children = [child for node in fragment.children for child in self.build_children(node)]
    return ExpressionStatement(JsxFragment(children))

  def build_statement(self, node: Node) -> TopLevelNode:
    """
    Converts a node that is the only top-level node.
    """
    if isinstance(node, Comment):
      return CommentBlock(node.value)

    if isinstance(node, Text):
      return self._text_statement(self._split(node.value))

    if isinstance(node, Element):
      return ExpressionStatement(self._element(node, depth=1))

    raise self._unsupported(node)

  def build_children(self, node: Node, depth: int = 1) -> Iterator[JsxNode]:
    """
    Converts a node into the JSX children it contributes to its parent.

    Args:
        node: The markup node.
        depth: Nesting level of the node, the top level being 1.

    Yields:
        JsxNode: Output children in document order.
    """
    if isinstance(node, Comment):
      yield JsxExpressionSlot(comment=node.value)

    elif isinstance(node, Text):
      yield from self._text_children(self._split(node.value))

    elif isinstance(node, Element):
      yield self._element(node, depth)

    else:
      raise self._unsupported(node)

  def _element(self, node: Element, depth: int) -> JsxNode:
    if depth > self.config.max_depth:
      raise StructuralError(
        f"Element <{node.tag}> is nested deeper than the limit of {self.config.max_depth}.",
        node_kind="element",
      )

    attributes = self._attributes(node)

    if node.tag in RAW_TEXT_ELEMENTS:
      body = "".join(child.value for child in node.children if isinstance(child, Text))
      return JsxRawTextElement(node.tag, attributes, body if body.strip() else None)

    children = [child for sub in node.children for child in self.build_children(sub, depth + 1)]
    return JsxElement(node.tag, attributes, children, self_closing=not node.children)

  def _attributes(self, node: Element) -> List[JsxAttribute]:
    return convert_attributes(
      node.attributes,
      parameter=self.config.event_parameter,
      fixme=self.config.handler_fixme,
    )

  def _split(self, text: str) -> List[TextPart]:
    if not self.config.merge_tags:
      return [TextPart.literal(text)] if text else []
    return split_merge_tags(text)

  def _merge_comment(self, part: TextPart) -> str:
    return f"{self.config.merge_tag_marker}{part.value}"

  def _text_children(self, parts: List[TextPart]) -> Iterator[JsxNode]:
    for part in parts:
      if part.is_dynamic:
        yield JsxExpressionSlot(comment=self._merge_comment(part))
      else:
        yield JsxText(encode_text(part.value, escape_braces=True))

  def _text_statement(self, parts: List[TextPart]) -> TopLevelNode:
    if len(parts) == 1:
      part = parts[0]
      if part.is_dynamic:
        return CommentBlock(self._merge_comment(part))
      return ExpressionStatement(StringLiteral(part.value))

    return ExpressionStatement(JsxFragment(list(self._text_children(parts))))

  @staticmethod
  def _unsupported(node: Node) -> StructuralError:
    if isinstance(node, DocumentType):
      return StructuralError("Document type nodes cannot be converted to JSX.", node_kind="doctype")
    return StructuralError(f"Unsupported node type: {type(node).__name__}", node_kind=type(node).__name__)
