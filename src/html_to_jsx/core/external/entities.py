"""
HTML entity encoding for JSX text.

Escapes the five HTML-significant characters and every non-ASCII or control
character, preferring named entities. Other ASCII punctuation is left alone.
Braces are kept unless ``escape_braces`` is set, which JSX text needs so a
literal brace is not read as an expression container.
"""

import re
from functools import lru_cache
from html.entities import codepoint2name, html5
from typing import Dict

_NEEDS_ENCODING = re.compile(r"[&<>\"'\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\U0010ffff]")
_NEEDS_ENCODING_WITH_BRACES = re.compile(r"[&<>\"'\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\U0010ffff{}]")


@lru_cache(maxsize=1)
def _entity_names() -> Dict[str, str]:
  names: Dict[str, str] = {chr(code): name for code, name in codepoint2name.items()}
  names["'"] = "apos"
  for name, char in html5.items():
    if len(char) == 1 and name.endswith(";") and char not in names:
      names[char] = name[:-1]
  return names


def _encode_char(match: "re.Match[str]") -> str:
  char = match.group(0)
  # JSX only knows the HTML 4 names, which have none for braces
  if char in "{}":
    return f"&#{ord(char)};"
  name = _entity_names().get(char)
  if name:
    return f"&{name};"
  return f"&#x{ord(char):x};"


def encode_text(text: str, escape_braces: bool = False) -> str:
  """
  Encodes text for use as JSX literal text.

  Args:
      text: Decoded text content.
      escape_braces: Also encode ``{`` and ``}`` as numeric references.

  Returns:
      str: The text with unsafe characters replaced by entities.
  """
  pattern = _NEEDS_ENCODING_WITH_BRACES if escape_braces else _NEEDS_ENCODING
  return pattern.sub(_encode_char, text)
