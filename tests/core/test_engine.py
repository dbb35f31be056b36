"""
Tests for the Conversion Engine.

Verifies:
1. Successful runs return code and no errors.
2. Fatal errors produce a failed result instead of raising.
3. Recoverable handler problems are reported as warnings.
"""

import logging

import pytest

from html_to_jsx.config import ConverterConfig
from html_to_jsx.core.engine import ConversionEngine
from html_to_jsx.core.exceptions import StructuralError


def test_run_success():
  result = ConversionEngine().run("  <p>hi</p>  ")
  assert result.success
  assert result.code == "<p>hi</p>"
  assert not result.has_errors
  assert result.warnings == []


def test_run_doctype_fails():
  result = ConversionEngine().run("<!DOCTYPE html><p>x</p>")
  assert not result.success
  assert result.code == ""
  assert result.has_errors
  assert "Document type" in result.errors[0]


def test_convert_raises():
  with pytest.raises(StructuralError):
    ConversionEngine().convert("<!doctype html>")


def test_handler_failure_reported_as_warning():
  result = ConversionEngine().run('<button onclick="this is invalid code.">x</button>')
  assert result.success
  assert "TODO: Fix event handler code" in result.code
  assert len(result.warnings) == 1
  assert "Could not parse handler code" in result.warnings[0]


def test_warning_collector_detached_after_run():
  ConversionEngine().run('<a onclick="((">x</a>')
  handlers = logging.getLogger("html_to_jsx").handlers
  assert not any(type(h).__name__ == "_WarningCollector" for h in handlers)


def test_config_applied():
  engine = ConversionEngine(ConverterConfig(event_parameter="e"))
  assert engine.run('<a onclick="x = 1">y</a>').code == "<a onClick={e => { x = 1; }}>y</a>"
