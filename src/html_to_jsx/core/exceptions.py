"""
Exception hierarchy for the conversion pipeline.

- ``StructuralError``: the markup tree contains a node the template language
  cannot represent (a document type declaration, or nesting beyond the
  configured depth). Fatal for the whole conversion.
- ``ScriptParseError``: inline handler code could not be parsed. Always
  recovered inside the attribute engine.
- ``SerializationError``: the template emitter produced no text. Fatal.
"""

from typing import Optional


class HtmlToJsxError(Exception):
  """Base class for all conversion errors."""


class StructuralError(HtmlToJsxError):
  """
  Raised when the markup tree has a shape that cannot be converted.
  """

  def __init__(self, message: str, node_kind: Optional[str] = None) -> None:
    super().__init__(message)
    self.node_kind = node_kind


class ScriptParseError(HtmlToJsxError):
  """
  Raised by the script parser when embedded code is not valid.

  Attributes:
      source: The code that failed to parse.
      index: Character offset of the failure, if known.
  """

  def __init__(self, message: str, source: str, index: Optional[int] = None) -> None:
    super().__init__(message)
    self.source = source
    self.index = index


class SerializationError(HtmlToJsxError):
  """Raised when the emitter does not produce any output text."""
