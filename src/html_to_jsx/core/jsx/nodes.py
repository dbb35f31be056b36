# src/html_to_jsx/core/jsx/nodes.py

"""
JSX Template Nodes.

This module defines the output tree produced by the builder. Every node
serializes itself through ``to_jsx()`` in the concise form:

    - JsxElement          -> <div className="a">...</div> / <br />
    - JsxRawTextElement   -> <script>{`...`}</script>
    - JsxExpressionSlot   -> { /* comment */ } / {`code`}
    - JsxText             -> literal text
    - JsxFragment         -> <>...</>

Attribute values are expression nodes (literals, identifiers, object and
arrow-function expressions). Top-level statements wrap either an expression
or a bare comment block.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Union


def _format_number(value: Union[int, float]) -> str:
  """
  Renders a number the way JavaScript's ``String(number)`` does.

  Shortest round-trip digits, plain decimal notation for magnitudes in
  ``[1e-6, 1e21)`` and exponent notation (``1e-7``, ``1.5e+21``) outside.
  """
  if isinstance(value, int) and abs(value) < 10**21:
    return str(value)
  number = float(value)
  if number == 0:
    return "0"

  sign = "-" if number < 0 else ""
  _, digit_tuple, exponent = Decimal(repr(abs(number))).as_tuple()
  digits = "".join(map(str, digit_tuple)).rstrip("0")
  exponent += len(digit_tuple) - len(digits)
  # value == 0.<digits> * 10**point
  point = exponent + len(digits)

  if len(digits) <= point <= 21:
    return sign + digits + "0" * (point - len(digits))
  if 0 < point <= 21:
    return sign + digits[:point] + "." + digits[point:]
  if -6 < point <= 0:
    return sign + "0." + "0" * -point + digits

  power = point - 1
  mantissa = digits if len(digits) == 1 else digits[0] + "." + digits[1:]
  return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def _quote_string(value: str) -> str:
  """Renders a double-quoted JS string literal with ASCII-only output."""
  out = []
  for char in value:
    code = ord(char)
    if char == "\\":
      out.append("\\\\")
    elif char == '"':
      out.append('\\"')
    elif char == "\n":
      out.append("\\n")
    elif char == "\r":
      out.append("\\r")
    elif char == "\t":
      out.append("\\t")
    elif 0x20 <= code < 0x7F:
      out.append(char)
    elif code <= 0xFF:
      out.append(f"\\x{code:02X}")
    elif code <= 0xFFFF:
      out.append(f"\\u{code:04X}")
    else:
      code -= 0x10000
      out.append(f"\\u{0xD800 + (code >> 10):04X}\\u{0xDC00 + (code & 0x3FF):04X}")
  return '"' + "".join(out) + '"'


class JsxNode(ABC):
  """
  Abstract base class for all output nodes.

  Enforces a `to_jsx()` method for serialization support.
  """

  @abstractmethod
  def to_jsx(self) -> str:
    """
    Serializes the node into concise JSX source.

    Returns:
        str: JSX code string.
    """
    pass


# --- Expressions ---


@dataclass
class StringLiteral(JsxNode):
  value: str

  def to_jsx(self) -> str:
    return _quote_string(self.value)


@dataclass
class NumberLiteral(JsxNode):
  value: Union[int, float]

  def to_jsx(self) -> str:
    return _format_number(self.value)


@dataclass
class BooleanLiteral(JsxNode):
  value: bool

  def to_jsx(self) -> str:
    return "true" if self.value else "false"


@dataclass
class Identifier(JsxNode):
  """A reference to a named binding, e.g. a callback."""

  name: str

  def to_jsx(self) -> str:
    return self.name


@dataclass
class TemplateLiteral(JsxNode):
  """
  A template literal holding raw, uninterpreted code.

  Example:
      `console.log("hi");`
  """

  raw: str

  def to_jsx(self) -> str:
    return f"`{self.raw}`"


@dataclass
class ObjectProperty(JsxNode):
  """
  A single ``key: value`` entry.

  Attributes:
      key: Property name.
      value: Property value expression.
      quoted: Render the key as a string literal (CSS custom properties).
  """

  key: str
  value: JsxNode
  quoted: bool = False

  def to_jsx(self) -> str:
    key = _quote_string(self.key) if self.quoted else self.key
    return f"{key}: {self.value.to_jsx()}"


@dataclass
class ObjectExpression(JsxNode):
  properties: List[ObjectProperty] = field(default_factory=list)

  def to_jsx(self) -> str:
    if not self.properties:
      return "{}"
    return "{ " + ", ".join(p.to_jsx() for p in self.properties) + " }"


@dataclass
class FixmeStatement(JsxNode):
  """
  Code that could not be parsed, kept verbatim as a template literal and
  preceded by a line comment asking for a manual fix.
  """

  comment: str
  raw: str

  def to_jsx(self) -> str:
    return f"//{self.comment}\n{TemplateLiteral(self.raw).to_jsx()};"


@dataclass
class ArrowFunction(JsxNode):
  """
  A single-parameter arrow function with a block body.

  Example:
      event => { window.scrollY = 0; }
  """

  parameter: str
  body: List[JsxNode] = field(default_factory=list)

  def to_jsx(self) -> str:
    if not self.body:
      return f"{self.parameter} => {{}}"
    return f"{self.parameter} => {{ " + " ".join(s.to_jsx() for s in self.body) + " }"


# --- Attributes ---


@dataclass
class JsxAttribute(JsxNode):
  """
  A converted attribute.

  Attributes:
      name: Framework attribute name.
      value: None for the bare boolean shorthand, a StringLiteral for quoted
          values, any other expression for ``name={...}``.
  """

  name: str
  value: Optional[JsxNode] = None

  def to_jsx(self) -> str:
    if self.value is None:
      return self.name
    if isinstance(self.value, StringLiteral):
      text = self.value.value.replace('"', "&quot;")
      return f'{self.name}="{text}"'
    return f"{self.name}={{{self.value.to_jsx()}}}"


def _opening(tag: str, attributes: List[JsxAttribute], self_closing: bool) -> str:
  parts = [tag, *(a.to_jsx() for a in attributes)]
  if self_closing:
    return "<" + " ".join(parts) + " />"
  return "<" + " ".join(parts) + ">"


# --- Children ---


@dataclass
class JsxText(JsxNode):
  """Literal text, already entity-encoded."""

  value: str

  def to_jsx(self) -> str:
    return self.value


@dataclass
class JsxExpressionSlot(JsxNode):
  """
  A ``{...}`` child. Without an expression it is an empty slot, used to
  carry a comment that is never evaluated.
  """

  expression: Optional[JsxNode] = None
  comment: Optional[str] = None

  def to_jsx(self) -> str:
    if self.expression is not None:
      return f"{{{self.expression.to_jsx()}}}"
    if self.comment is not None:
      return f"{{ /*{self.comment}*/ }}"
    return "{}"


@dataclass
class JsxElement(JsxNode):
  tag: str
  attributes: List[JsxAttribute] = field(default_factory=list)
  children: List[JsxNode] = field(default_factory=list)
  self_closing: bool = False

  def to_jsx(self) -> str:
    opening = _opening(self.tag, self.attributes, self.self_closing)
    if self.self_closing:
      return opening
    return opening + "".join(c.to_jsx() for c in self.children) + f"</{self.tag}>"


@dataclass
class JsxRawTextElement(JsxNode):
  """
  A script-like element whose body is emitted verbatim inside a template
  literal. No body renders self-closing.
  """

  tag: str
  attributes: List[JsxAttribute] = field(default_factory=list)
  raw_body: Optional[str] = None

  @property
  def children(self) -> List[JsxNode]:
    if self.raw_body is None:
      return []
    return [JsxExpressionSlot(TemplateLiteral(self.raw_body))]

  def to_jsx(self) -> str:
    if self.raw_body is None:
      return _opening(self.tag, self.attributes, True)
    body = "".join(c.to_jsx() for c in self.children)
    return _opening(self.tag, self.attributes, False) + body + f"</{self.tag}>"


@dataclass
class JsxFragment(JsxNode):
  children: List[JsxNode] = field(default_factory=list)

  def to_jsx(self) -> str:
    return "<>" + "".join(c.to_jsx() for c in self.children) + "</>"


# --- Top-level statements ---


@dataclass
class ExpressionStatement(JsxNode):
  expression: JsxNode

  def to_jsx(self) -> str:
    return f"{self.expression.to_jsx()};"


@dataclass
class CommentBlock(JsxNode):
  """An empty block carrying an inner comment."""

  comment: str

  def to_jsx(self) -> str:
    return f"{{ /*{self.comment}*/ }}"


TopLevelNode = Union[ExpressionStatement, CommentBlock]
