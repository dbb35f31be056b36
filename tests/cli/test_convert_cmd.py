"""
Tests for the `convert` CLI command.

Verifies:
1. Printing JSX to stdout and writing it to a file.
2. Reading from standard input.
3. Config overrides from the command line and pyproject.toml.
4. Exit codes for missing input, invalid config and failed conversions.
"""

import io
import sys

import pytest
from rich.console import Console

from html_to_jsx import __version__
from html_to_jsx.cli.__main__ import main
from html_to_jsx.utils.console import set_console


@pytest.fixture
def log_buffer():
  buf = io.StringIO()
  set_console(Console(file=buf, width=200))
  return buf


@pytest.fixture
def html_file(tmp_path):
  path = tmp_path / "page.html"
  path.write_text('<div class="a" tabindex="2"><!-- hi --></div>\n', encoding="utf-8")
  return path


def test_convert_to_stdout(html_file, capsys, log_buffer):
  assert main(["convert", str(html_file)]) == 0
  assert capsys.readouterr().out == '<div className="a" tabIndex={2}>{ /* hi */ }</div>\n'


def test_convert_to_file(html_file, tmp_path, log_buffer):
  out = tmp_path / "out" / "page.jsx"
  assert main(["convert", str(html_file), "--out", str(out)]) == 0
  assert out.read_text(encoding="utf-8") == '<div className="a" tabIndex={2}>{ /* hi */ }</div>\n'
  assert "Converted" in log_buffer.getvalue()


def test_convert_from_stdin(monkeypatch, capsys, log_buffer):
  monkeypatch.setattr(sys, "stdin", io.StringIO("<p>{{ name }}</p>"))
  assert main(["convert", "-"]) == 0
  assert capsys.readouterr().out == "<p>{ /*$merge: {{ name }}*/ }</p>\n"


def test_config_override(html_file, capsys, log_buffer):
  html_file.write_text("<p>{{ name }}</p>", encoding="utf-8")
  assert main(["convert", str(html_file), "--config", "merge_tags=false"]) == 0
  assert capsys.readouterr().out == "<p>&#123;&#123; name &#125;&#125;</p>\n"


def test_pyproject_settings(html_file, tmp_path, capsys, log_buffer):
  (tmp_path / "pyproject.toml").write_text('[tool.html_to_jsx]\nevent_parameter = "e"\n')
  html_file.write_text('<a onclick="x = 1">y</a>', encoding="utf-8")
  assert main(["convert", str(html_file)]) == 0
  assert capsys.readouterr().out == "<a onClick={e => { x = 1; }}>y</a>\n"


def test_missing_input(tmp_path, log_buffer):
  assert main(["convert", str(tmp_path / "nope.html")]) == 1
  assert "Input not found" in log_buffer.getvalue()


def test_invalid_config(html_file, log_buffer):
  assert main(["convert", str(html_file), "--config", "max_depth=0"]) == 1
  assert "Invalid configuration" in log_buffer.getvalue()


def test_failed_conversion(html_file, capsys, log_buffer):
  html_file.write_text("<!DOCTYPE html><p>x</p>", encoding="utf-8")
  assert main(["convert", str(html_file)]) == 1
  assert capsys.readouterr().out == ""
  assert "Document type" in log_buffer.getvalue()


def test_version(capsys):
  with pytest.raises(SystemExit) as exc_info:
    main(["--version"])
  assert exc_info.value.code == 0
  assert __version__ in capsys.readouterr().out
