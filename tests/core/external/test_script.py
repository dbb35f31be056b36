"""
Tests for inline script parsing.

Verifies:
1. Statements are split and terminated.
2. Block statements keep their own shape.
3. Invalid code raises ScriptParseError with the source attached.
"""

import pytest

from html_to_jsx.core.exceptions import ScriptParseError
from html_to_jsx.core.external import Statement, parse_statements


def test_single_expression_terminated():
  assert parse_statements("x=1") == [Statement("ExpressionStatement", "x=1;")]


def test_multiple_statements():
  result = parse_statements("a = 1; b()")
  assert [s.code for s in result] == ["a = 1;", "b();"]
  assert [s.kind for s in result] == ["ExpressionStatement", "ExpressionStatement"]


def test_block_statement_not_terminated():
  (stmt,) = parse_statements("if (x) { y() }")
  assert stmt.kind == "IfStatement"
  assert stmt.code == "if (x) { y() }"


def test_variable_declaration():
  (stmt,) = parse_statements("var a = 2")
  assert stmt.to_jsx() == "var a = 2;"


def test_empty_source():
  assert parse_statements("") == []


def test_invalid_code_raises():
  with pytest.raises(ScriptParseError) as exc_info:
    parse_statements("this is invalid code.")
  assert exc_info.value.source == "this is invalid code."
