"""
HTML Fragment Parser.

Parses a markup fragment using standard library `html.parser` and builds a
tree of ``html_to_jsx.core.html.nodes``.

Tree construction follows the HTML rules that matter for conversion:
- Void elements never take children.
- ``<x/>`` only self-closes void elements and foreign (SVG/MathML) content.
- An end tag closes up to the nearest matching open element; a stray end tag
  is ignored; elements still open at the end of input are closed.
- Inside SVG, the lower-cased tag and attribute names are restored to their
  canonical camelCase (``viewbox`` -> ``viewBox``).
- Duplicate attributes after the first are dropped.
"""

from html.parser import HTMLParser
from typing import List, Optional, Tuple

from html_to_jsx.core.html.nodes import (
  Comment,
  DocumentFragment,
  DocumentType,
  Element,
  Node,
  Text,
)

VOID_ELEMENTS = frozenset(
  {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "keygen",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
  }
)

# Children of these SVG elements are HTML again.
SVG_HTML_INTEGRATION_POINTS = frozenset({"foreignObject", "desc", "title"})

SVG_TAG_NAMES = {
  name.lower(): name
  for name in (
    "altGlyph",
    "altGlyphDef",
    "altGlyphItem",
    "animateColor",
    "animateMotion",
    "animateTransform",
    "clipPath",
    "feBlend",
    "feColorMatrix",
    "feComponentTransfer",
    "feComposite",
    "feConvolveMatrix",
    "feDiffuseLighting",
    "feDisplacementMap",
    "feDistantLight",
    "feDropShadow",
    "feFlood",
    "feFuncA",
    "feFuncB",
    "feFuncG",
    "feFuncR",
    "feGaussianBlur",
    "feImage",
    "feMerge",
    "feMergeNode",
    "feMorphology",
    "feOffset",
    "fePointLight",
    "feSpecularLighting",
    "feSpotLight",
    "feTile",
    "feTurbulence",
    "foreignObject",
    "glyphRef",
    "linearGradient",
    "radialGradient",
    "textPath",
  )
}

SVG_ATTRIBUTE_NAMES = {
  name.lower(): name
  for name in (
    "attributeName",
    "attributeType",
    "baseFrequency",
    "baseProfile",
    "calcMode",
    "clipPathUnits",
    "diffuseConstant",
    "edgeMode",
    "filterUnits",
    "glyphRef",
    "gradientTransform",
    "gradientUnits",
    "kernelMatrix",
    "kernelUnitLength",
    "keyPoints",
    "keySplines",
    "keyTimes",
    "lengthAdjust",
    "limitingConeAngle",
    "markerHeight",
    "markerUnits",
    "markerWidth",
    "maskContentUnits",
    "maskUnits",
    "numOctaves",
    "pathLength",
    "patternContentUnits",
    "patternTransform",
    "patternUnits",
    "pointsAtX",
    "pointsAtY",
    "pointsAtZ",
    "preserveAlpha",
    "preserveAspectRatio",
    "primitiveUnits",
    "refX",
    "refY",
    "repeatCount",
    "repeatDur",
    "requiredExtensions",
    "requiredFeatures",
    "specularConstant",
    "specularExponent",
    "spreadMethod",
    "startOffset",
    "stdDeviation",
    "stitchTiles",
    "surfaceScale",
    "systemLanguage",
    "tableValues",
    "targetX",
    "targetY",
    "textLength",
    "viewBox",
    "viewTarget",
    "xChannelSelector",
    "yChannelSelector",
    "zoomAndPan",
  )
}


class FragmentTreeBuilder(HTMLParser):
  """
  HTML Parser callback handler.
  Assembles the event stream into a ``DocumentFragment``.
  """

  def __init__(self) -> None:
    super().__init__(convert_charrefs=True)
    self.fragment = DocumentFragment()
    self._open: List[Element] = []

  def _append(self, node: Node) -> None:
    siblings = self._open[-1].children if self._open else self.fragment.children
    if isinstance(node, Text) and siblings and isinstance(siblings[-1], Text):
      siblings[-1].value += node.value
      return
    siblings.append(node)

  def _namespace_for(self, tag: str) -> str:
    if tag in ("svg", "math"):
      return tag
    if not self._open:
      return "html"
    parent = self._open[-1]
    if parent.namespace == "svg" and parent.tag in SVG_HTML_INTEGRATION_POINTS:
      return "html"
    return parent.namespace

  def _create_element(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> Element:
    namespace = self._namespace_for(tag)
    if namespace == "svg":
      tag = SVG_TAG_NAMES.get(tag, tag)

    attributes = []
    seen = set()
    for name, value in attrs:
      if name in seen:
        continue
      seen.add(name)
      if namespace == "svg":
        name = SVG_ATTRIBUTE_NAMES.get(name, name)
      elif namespace == "math" and name == "definitionurl":
        name = "definitionURL"
      attributes.append((name, value if value is not None else ""))

    return Element(tag=tag, attributes=attributes, namespace=namespace)

  def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
    element = self._create_element(tag, attrs)
    self._append(element)
    if element.namespace == "html" and tag in VOID_ELEMENTS:
      return
    self._open.append(element)

  def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
    element = self._create_element(tag, attrs)
    self._append(element)
    # The self-closing flag is ignored on non-void HTML elements
    if element.namespace == "html" and tag not in VOID_ELEMENTS:
      self._open.append(element)

  def handle_endtag(self, tag: str) -> None:
    for index in range(len(self._open) - 1, -1, -1):
      if self._open[index].tag.lower() == tag:
        del self._open[index:]
        return

  def handle_data(self, data: str) -> None:
    if data:
      self._append(Text(data))

  def handle_comment(self, data: str) -> None:
    self._append(Comment(data))

  def handle_decl(self, decl: str) -> None:
    if decl.lower().startswith("doctype"):
      self._append(DocumentType(decl[7:].strip().lower() or "html"))
    else:
      self._append(Comment(decl))

  def unknown_decl(self, data: str) -> None:
    in_foreign = bool(self._open) and self._open[-1].namespace != "html"
    if in_foreign and data.startswith("CDATA["):
      self._append(Text(data[len("CDATA[") :]))
    else:
      self._append(Comment(f"[{data}]]"))

  def handle_pi(self, data: str) -> None:
    # Processing instructions are bogus comments in HTML
    self._append(Comment(f"?{data}"))

  def close(self) -> None:
    super().close()
    self._open.clear()


class HtmlFragmentParser:
  """
  Facade for parsing markup strings into a ``DocumentFragment``.
  """

  def __init__(self, source: str) -> None:
    self.source = source

  def parse(self) -> DocumentFragment:
    builder = FragmentTreeBuilder()
    builder.feed(self.source)
    builder.close()
    return builder.fragment


def parse_fragment(source: str) -> DocumentFragment:
  """
  Parses a markup fragment.

  Args:
      source: Markup text.

  Returns:
      DocumentFragment: The parsed top-level nodes.
  """
  return HtmlFragmentParser(source).parse()
