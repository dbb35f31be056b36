"""
Attribute Conversion Engine.

Maps markup attributes (name and raw string value) onto typed JSX attributes.
The rule tables in ``html_to_jsx.core.attributes`` are checked in priority
order; the first match decides the output. Every attribute produces exactly
one ``JsxAttribute`` and no rule raises: unparseable values degrade to strings
and unparseable handler code to an escape-hatch statement.
"""

import math
import re
from typing import AbstractSet, Iterable, List, Optional, Tuple, Union

from html_to_jsx.core import attributes as tables
from html_to_jsx.core.escape_hatch import EscapeHatch
from html_to_jsx.core.exceptions import ScriptParseError
from html_to_jsx.core.external.script import parse_statements
from html_to_jsx.core.external.style import parse_style_declarations
from html_to_jsx.core.jsx.nodes import (
  ArrowFunction,
  BooleanLiteral,
  Identifier,
  JsxAttribute,
  JsxNode,
  NumberLiteral,
  ObjectExpression,
  ObjectProperty,
  StringLiteral,
)
from html_to_jsx.enums import AttributeRule

Number = Union[int, float]

EVENT_PARAMETER = "event"

_CAMELIZE = re.compile(r"[-:]([a-z])")
_CSS_VARIABLE = re.compile(r"^--\w+")
_PX_VALUE = re.compile(r"^(\d+)px$")
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PREFIXED = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_RADIX = {"x": 16, "o": 8, "b": 2}

# handleClick() -> handleClick
_EMPTY_CALL = re.compile(r"^\s*((?:[^\W\d]|\$)(?:\w|\$)*)\(\)\s*$")


def camelize(name: str) -> str:
  """
  Converts kebab-case or colon:case to camelCase.

  Only lower-case letters after a separator are lifted, so ``stroke-width``
  becomes ``strokeWidth`` and ``-webkit-box`` becomes ``WebkitBox``.
  """
  return _CAMELIZE.sub(lambda m: m.group(1).upper(), name)


def to_number(value: str) -> Optional[Number]:
  """
  Converts a string to a finite number using the target language's rules.

  Surrounding whitespace is ignored and a blank string is zero. Decimal,
  exponent and 0x/0o/0b literals are accepted.

  Returns:
      The number, or None when the string is not a finite number.
  """
  text = value.strip()
  if not text:
    return 0

  prefixed = _PREFIXED.fullmatch(text)
  if prefixed:
    try:
      return int(prefixed.group(2), _RADIX[prefixed.group(1).lower()])
    except ValueError:
      return None

  if not _DECIMAL.fullmatch(text):
    return None

  number = float(text)
  if not math.isfinite(number):
    return None
  if number.is_integer() and abs(number) < 2**53:
    return int(number)
  return number


def _string_or_number(name: str, value: str) -> JsxAttribute:
  number = to_number(value)
  if number is None:
    return JsxAttribute(name, StringLiteral(value))
  return JsxAttribute(name, NumberLiteral(number))


def convert_style(style: str) -> ObjectExpression:
  """
  Converts an inline style string into an object expression.

  Property names are camelized, except CSS custom properties which keep their
  name as a quoted key. Integer pixel values become numbers unless the
  property reads a bare number differently (see ``STYLE_KEEP_PX``).

  Example:
      "padding: 10px; color: red" -> { padding: 10, color: "red" }
  """
  properties = []
  for name, value in parse_style_declarations(style):
    px_match = _PX_VALUE.match(value)
    strip_px = px_match is not None and name.lower() not in tables.STYLE_KEEP_PX

    node: JsxNode = NumberLiteral(int(px_match.group(1))) if strip_px else StringLiteral(value)

    if _CSS_VARIABLE.match(name):
      properties.append(ObjectProperty(name, node, quoted=True))
    else:
      properties.append(ObjectProperty(camelize(name), node))

  return ObjectExpression(properties)


def booleanize_attribute(name: str, value: str, true_literals: Optional[AbstractSet[str]] = None) -> JsxAttribute:
  """
  Coerces an attribute value to a boolean where the markup means one.

  The empty string, ``"true"`` and the attribute's own name are true;
  ``"false"`` is false; anything else stays a string.

  Args:
      name: Output attribute name.
      value: Raw markup value.
      true_literals: Names that keep an explicit ``={true}`` instead of the
          bare shorthand.

  Returns:
      JsxAttribute: The converted attribute.
  """
  if name == "value" and value == "":
    return JsxAttribute(name, StringLiteral(value))

  if value in ("", "true") or value == name.lower():
    if true_literals and name in true_literals:
      return JsxAttribute(name, BooleanLiteral(True))
    return JsxAttribute(name, None)

  if value == "false":
    return JsxAttribute(name, BooleanLiteral(False))

  return JsxAttribute(name, StringLiteral(value))


def functionize_attribute(
  name: str,
  value: str,
  parameter: str = EVENT_PARAMETER,
  fixme: str = EscapeHatch.MARKER,
) -> JsxAttribute:
  """
  Turns inline event-handler code into a function expression.

  1. ``handle()`` becomes a reference to ``handle``.
  2. Parseable code becomes ``event => { ... }``.
  3. Anything else is preserved verbatim through the escape hatch.

  Args:
      name: Output attribute name, e.g. ``onClick``.
      value: The handler source.
      parameter: Name of the function's single parameter.
      fixme: Marker comment for unparseable code.

  Returns:
      JsxAttribute: The converted attribute.
  """
  call_match = _EMPTY_CALL.match(value)
  if call_match is not None:
    return JsxAttribute(name, Identifier(call_match.group(1)))

  try:
    body: List[JsxNode] = list(parse_statements(value))
  except ScriptParseError as e:
    body = [EscapeHatch.mark_failure(value, str(e), marker=fixme)]

  return JsxAttribute(name, ArrowFunction(parameter, body))


def classify_attribute(name: str) -> Tuple[AttributeRule, str]:
  """
  Finds the rule that applies to an attribute name.

  Returns:
      Tuple[AttributeRule, str]: The rule and the output attribute name.
  """
  if name == "style":
    return AttributeRule.STYLE, name

  if name in tables.RENAMED_ATTRIBUTES:
    return AttributeRule.RENAMED, tables.RENAMED_ATTRIBUTES[name]

  lowered = name.lower()

  if lowered in tables.EVENT_HANDLER_INDEX:
    return AttributeRule.EVENT_HANDLER, tables.EVENT_HANDLER_INDEX[lowered]

  if name in tables.SVG_BOOLEAN_SET:
    return AttributeRule.SVG_BOOLEAN, name

  if lowered in tables.BOOLEAN_INDEX:
    return AttributeRule.BOOLEAN, tables.BOOLEAN_INDEX[lowered]

  if lowered in tables.NUMBER_INDEX:
    return AttributeRule.NUMERIC, tables.NUMBER_INDEX[lowered]

  if name in tables.SVG_CAMELIZED_ATTRIBUTES:
    return AttributeRule.SVG_CAMELIZED, camelize(name)

  if lowered in tables.MIXED_CASE_INDEX:
    return AttributeRule.MIXED_CASE, tables.MIXED_CASE_INDEX[lowered]

  return AttributeRule.PASS_THROUGH, name


def convert_attribute(
  name: str,
  value: str,
  parameter: str = EVENT_PARAMETER,
  fixme: str = EscapeHatch.MARKER,
) -> JsxAttribute:
  """
  Converts a single markup attribute.

  Args:
      name: Markup attribute name.
      value: Raw markup value.
      parameter: Parameter name for functionized event handlers.
      fixme: Marker comment for unparseable handler code.

  Returns:
      JsxAttribute: The converted attribute.
  """
  rule, jsx_name = classify_attribute(name)

  if rule is AttributeRule.STYLE:
    return JsxAttribute(jsx_name, convert_style(value))

  if rule is AttributeRule.EVENT_HANDLER:
    return functionize_attribute(jsx_name, value, parameter=parameter, fixme=fixme)

  if rule is AttributeRule.SVG_BOOLEAN:
    return booleanize_attribute(jsx_name, value)

  if rule is AttributeRule.BOOLEAN:
    return booleanize_attribute(jsx_name, value, tables.KEEP_TRUE_EXPRESSION)

  if rule is AttributeRule.NUMERIC:
    return _string_or_number(jsx_name, value)

  if rule is AttributeRule.SVG_CAMELIZED and tables.SVG_CAMELIZED_ATTRIBUTES[name]:
    return _string_or_number(jsx_name, value)

  return JsxAttribute(jsx_name, StringLiteral(value))


def convert_attributes(
  attributes: Iterable[Tuple[str, str]],
  parameter: str = EVENT_PARAMETER,
  fixme: str = EscapeHatch.MARKER,
) -> List[JsxAttribute]:
  """
  Converts an attribute list, keeping order and length.

  Args:
      attributes: ``(name, value)`` pairs as written in the markup.
      parameter: Parameter name for functionized event handlers.
      fixme: Marker comment for unparseable handler code.

  Returns:
      List[JsxAttribute]: One converted attribute per input attribute.
  """
  return [convert_attribute(name, value, parameter=parameter, fixme=fixme) for name, value in attributes]
