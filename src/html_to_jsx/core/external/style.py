"""
Inline style declaration parsing.

Wraps ``tinycss2`` to turn the value of a ``style`` attribute into ordered
``(property, value)`` pairs. Empty declarations, comments and invalid
fragments are skipped.
"""

from typing import Iterator, Tuple

import tinycss2


def parse_style_declarations(declarations: str) -> Iterator[Tuple[str, str]]:
  """
  Yields the declarations of a style attribute in source order.

  Args:
      declarations: Raw attribute value, e.g. ``"padding: 10px; color: red"``.

  Yields:
      Tuple[str, str]: Property name as written and its serialized value.
  """
  nodes = tinycss2.parse_declaration_list(declarations, skip_comments=True, skip_whitespace=True)
  for node in nodes:
    if node.type != "declaration":
      continue
    value = tinycss2.serialize(node.value).strip()
    if node.important:
      value = f"{value} !important"
    yield node.name, value
