"""
Enumerations for html-to-jsx.

This module defines the standard enumerations shared by the tokenizer,
the attribute engine and the template builder.
"""

from enum import Enum


class TextPartKind(str, Enum):
  """
  Classification of a span produced by the merge-tag tokenizer.
  """

  LITERAL = "string"  # Plain text
  DYNAMIC = "merge"  # Brace-delimited merge tag, delimiters included


class AttributeRule(str, Enum):
  """
  The rule that classified a markup attribute.

  Checked in declaration order by the attribute engine; the first match wins.
  """

  STYLE = "style"
  RENAMED = "renamed"
  EVENT_HANDLER = "event_handler"
  SVG_BOOLEAN = "svg_boolean"
  BOOLEAN = "boolean"
  NUMERIC = "numeric"
  SVG_CAMELIZED = "svg_camelized"
  MIXED_CASE = "mixed_case"
  PASS_THROUGH = "pass_through"
