"""
Merge-Tag Tokenizer.

Splits a text node into literal spans and brace-delimited merge tags
(``{{ email }}``, ``{% if x %}``...). Nested braces are balanced, so a merge tag
ends only when the brace depth returns to zero. A brace directly preceded by a
backslash never changes the depth.

The split is lossless: joining the ``value`` of every part reproduces the input.
"""

from dataclasses import dataclass
from typing import List

from html_to_jsx.enums import TextPartKind


@dataclass(frozen=True)
class TextPart:
  """
  One span of a tokenized text node.

  Attributes:
      kind: LITERAL for plain text, DYNAMIC for a merge tag.
      value: The raw characters, delimiters included for merge tags.
  """

  kind: TextPartKind
  value: str

  @property
  def is_dynamic(self) -> bool:
    return self.kind is TextPartKind.DYNAMIC

  @classmethod
  def literal(cls, value: str) -> "TextPart":
    return cls(TextPartKind.LITERAL, value)

  @classmethod
  def dynamic(cls, value: str) -> "TextPart":
    return cls(TextPartKind.DYNAMIC, value)


def split_merge_tags(text: str) -> List[TextPart]:
  """
  Splits a string into literal and merge-tag parts.

  If there are no merge tags the whole string comes back as a single literal
  part; the empty string yields an empty list.

  Every unescaped ``}`` lowers the depth, so a stray ``}`` leaves it negative
  and the braces that follow no longer open a merge tag. A ``{`` that is
  never closed leaves the rest of the input in a trailing literal part.

  Args:
      text: The text to split.

  Returns:
      List[TextPart]: The parts in input order.
  """
  parts: List[TextPart] = []
  depth = 0
  buffer = ""

  for index, char in enumerate(text):
    escaped = index > 0 and text[index - 1] == "\\"

    if char == "{" and not escaped:
      if depth == 0 and buffer:
        parts.append(TextPart.literal(buffer))
        buffer = ""
      buffer += char
      depth += 1
    elif char == "}" and not escaped:
      buffer += char
      depth -= 1
      if depth == 0:
        parts.append(TextPart.dynamic(buffer))
        buffer = ""
    else:
      buffer += char

  if buffer:
    parts.append(TextPart.literal(buffer))

  return parts
