"""
JSX Emitter.

Renders a top-level statement produced by the builder into the final source
text. The statement terminator of a lone expression is dropped so the output
can be pasted straight into a component's return value.
"""

from html_to_jsx.core.exceptions import SerializationError
from html_to_jsx.core.jsx.nodes import TopLevelNode


class JsxEmitter:
  def emit(self, statement: TopLevelNode) -> str:
    """
    Serializes a top-level statement.

    Args:
        statement: The root statement returned by the builder.

    Returns:
        str: The JSX source, without a trailing semicolon.

    Raises:
        SerializationError: If the statement renders to no text.
    """
    code = statement.to_jsx().strip()
    if code.endswith(";"):
      code = code[:-1]

    if not code:
      raise SerializationError(f"{type(statement).__name__} produced no output.")

    return code
