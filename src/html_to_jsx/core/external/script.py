"""
Inline Script Parsing.

Parses the code of inline event handlers with ``esprima``. The converter only
needs to know whether the code is valid and where each top-level statement
starts and ends, so statements are returned as normalized source slices
rather than as a full syntax tree.

esprima covers ES2017. Newer syntax such as ``a?.b()`` is a parse failure and
takes the escape-hatch path.
"""

from dataclasses import dataclass
from typing import List

import esprima
from esprima.error_handler import Error as EsprimaError

from html_to_jsx.core.exceptions import ScriptParseError

# Statement kinds that need an explicit terminator when written on one line.
_TERMINATED = frozenset(
  {
    "BreakStatement",
    "ContinueStatement",
    "DebuggerStatement",
    "DoWhileStatement",
    "ExpressionStatement",
    "ReturnStatement",
    "ThrowStatement",
    "VariableDeclaration",
  }
)


@dataclass(frozen=True)
class Statement:
  """
  A parsed top-level statement.

  Attributes:
      kind: ESTree node type, e.g. ``ExpressionStatement``.
      code: Source text of the statement, terminated where required.
  """

  kind: str
  code: str

  def to_jsx(self) -> str:
    return self.code


def parse_statements(source: str) -> List[Statement]:
  """
  Parses script source into its top-level statements.

  Args:
      source: Script code, e.g. ``"window.scrollY = 0"``.

  Returns:
      List[Statement]: The statements in source order.

  Raises:
      ScriptParseError: If the code is not a valid script.
  """
  try:
    program = esprima.parseScript(source, {"range": True})
  except EsprimaError as e:
    raise ScriptParseError(str(e), source, getattr(e, "index", None)) from e

  statements = []
  for node in program.body:
    start, end = node.range
    code = source[start:end].strip()
    if node.type in _TERMINATED and not code.endswith(";"):
      code += ";"
    statements.append(Statement(kind=node.type, code=code))
  return statements
