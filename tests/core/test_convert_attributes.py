"""
Tests for the Attribute Conversion Engine.

Verifies:
1. Camelization and number coercion helpers.
2. Inline style conversion (px stripping, custom properties).
3. Boolean coercion, including the explicit `={true}` names.
4. Event handler functionization and the escape hatch.
5. Order and length preservation across a full attribute list.
"""

import logging

import pytest

from html_to_jsx.core.convert_attributes import (
  booleanize_attribute,
  camelize,
  convert_attribute,
  convert_attributes,
  convert_style,
  functionize_attribute,
  to_number,
)
from html_to_jsx.core.jsx.nodes import (
  ArrowFunction,
  BooleanLiteral,
  FixmeStatement,
  Identifier,
  JsxAttribute,
  NumberLiteral,
  StringLiteral,
)


def render(name, value):
  return convert_attribute(name, value).to_jsx()


# --- Helpers ---


@pytest.mark.parametrize(
  "source,expected",
  [
    ("stroke-width", "strokeWidth"),
    ("background-color", "backgroundColor"),
    ("xmlns:xlink", "xmlnsXlink"),
    ("-webkit-box", "WebkitBox"),
    ("plain", "plain"),
    ("panose-1", "panose-1"),
  ],
)
def test_camelize(source, expected):
  assert camelize(source) == expected


@pytest.mark.parametrize(
  "text,expected",
  [
    ("2", 2),
    (" 42 ", 42),
    ("1.5", 1.5),
    ("-3", -3),
    (".5", 0.5),
    ("1e3", 1000),
    ("0x10", 16),
    ("0b101", 5),
    ("", 0),
    ("   ", 0),
  ],
)
def test_to_number_accepts(text, expected):
  result = to_number(text)
  assert result == expected
  assert type(result) is type(expected)


@pytest.mark.parametrize("text", ["abc", "10px", "1.2.3", "Infinity", "NaN", "0x", "1e999", "0b2"])
def test_to_number_rejects(text):
  assert to_number(text) is None


# --- Style ---


def test_style_px_stripped_and_camelized():
  assert convert_style("padding: 10px; background-color: red;").to_jsx() == '{ padding: 10, backgroundColor: "red" }'


def test_style_keeps_px_on_unitless_properties():
  assert convert_style("line-height: 14px; font-size: 16px;").to_jsx() == '{ lineHeight: "14px", fontSize: 16 }'


def test_style_non_integer_px_stays_string():
  assert convert_style("margin: 1.5px").to_jsx() == '{ margin: "1.5px" }'


def test_style_compound_value():
  assert convert_style("border: 1px solid red").to_jsx() == '{ border: "1px solid red" }'


def test_style_custom_property_is_quoted():
  result = convert_style("width: 12px; --bg-color: red;").to_jsx()
  assert result == '{ width: 12, "--bg-color": "red" }'


def test_style_important_kept():
  assert convert_style("color: red !important").to_jsx() == '{ color: "red !important" }'


def test_style_empty_and_invalid():
  assert convert_style("").to_jsx() == "{}"
  assert convert_style(";;").to_jsx() == "{}"
  assert convert_style("color red; margin: 0").to_jsx() == '{ margin: "0" }'


def test_style_attribute():
  assert render("style", "color: red") == 'style={{ color: "red" }}'


# --- Booleans ---


@pytest.mark.parametrize("value", ["", "true", "contenteditable"])
def test_boolean_true_shorthand(value):
  assert booleanize_attribute("contentEditable", value) == JsxAttribute("contentEditable", None)


def test_boolean_false():
  assert booleanize_attribute("hidden", "false").value == BooleanLiteral(False)


def test_boolean_other_value_stays_string():
  assert booleanize_attribute("download", "installer.exe").value == StringLiteral("installer.exe")


def test_boolean_keep_true_expression():
  assert booleanize_attribute("disabled", "", {"disabled"}).value == BooleanLiteral(True)
  assert booleanize_attribute("hidden", "", {"disabled"}).value is None


def test_empty_value_attribute_stays_string():
  assert render("value", "") == 'value=""'


@pytest.mark.parametrize(
  "name,value,expected",
  [
    ("contenteditable", "", "contentEditable"),
    ("value", "true", "value={true}"),
    ("disabled", "true", "disabled={true}"),
    ("checked", "false", "checked={false}"),
    ("playsinline", "playsinline", "playsInline"),
    ("async", "", "async"),
    ("download", "installer.exe", 'download="installer.exe"'),
    ("focusable", "true", "focusable"),
    ("focusable", "false", "focusable={false}"),
  ],
)
def test_boolean_attributes(name, value, expected):
  assert render(name, value) == expected


# --- Numbers and names ---


@pytest.mark.parametrize(
  "name,value,expected",
  [
    ("tabindex", "2", "tabIndex={2}"),
    ("tabindex", "wrong", 'tabIndex="wrong"'),
    ("border", "0", "border={0}"),
    ("cols", "40", "cols={40}"),
    ("tabindex", "0.000001", "tabIndex={0.000001}"),
    ("cols", "1e16", "cols={10000000000000000}"),
    ("stroke-width", "1.5", "strokeWidth={1.5}"),
    ("stroke-linecap", "round", 'strokeLinecap="round"'),
    ("stroke-width", "thin", 'strokeWidth="thin"'),
    ("class", "a b", 'className="a b"'),
    ("for", "name", 'htmlFor="name"'),
    ("contextmenu", "share", 'contextMenu="share"'),
    ("crossorigin", "anonymous", 'crossOrigin="anonymous"'),
    ("viewBox", "0 0 24 24", 'viewBox="0 0 24 24"'),
    ("data-id", "7", 'data-id="7"'),
  ],
)
def test_named_attributes(name, value, expected):
  assert render(name, value) == expected


def test_quote_in_value_is_escaped():
  assert render("title", 'say "hi"') == 'title="say &quot;hi&quot;"'


# --- Event handlers ---


def test_handler_empty_call_becomes_reference():
  attr = functionize_attribute("onClick", "handleButtonClick()")
  assert attr.value == Identifier("handleButtonClick")
  assert attr.to_jsx() == "onClick={handleButtonClick}"


def test_handler_empty_call_with_dollar_and_digits():
  assert functionize_attribute("onClick", " $go2() ").to_jsx() == "onClick={$go2}"


def test_handler_call_with_arguments_is_wrapped():
  assert functionize_attribute("onClick", "go(1)").to_jsx() == "onClick={event => { go(1); }}"


def test_handler_statement_wrapped():
  assert render("onclick", "window.scrollY = 0") == "onClick={event => { window.scrollY = 0; }}"


def test_handler_multiple_statements():
  result = render("onchange", "a = 1; b()")
  assert result == "onChange={event => { a = 1; b(); }}"


def test_handler_custom_parameter():
  attr = functionize_attribute("onClick", "x = 1", parameter="e")
  assert isinstance(attr.value, ArrowFunction)
  assert attr.to_jsx() == "onClick={e => { x = 1; }}"


def test_handler_empty_code():
  assert render("onclick", "") == "onClick={event => {}}"


def test_handler_invalid_code_uses_escape_hatch(caplog):
  with caplog.at_level(logging.WARNING):
    attr = convert_attribute("onclick", "this is invalid code.")

  assert attr.value.body == [FixmeStatement(" TODO: Fix event handler code", "this is invalid code.")]
  assert attr.to_jsx() == "onClick={event => { // TODO: Fix event handler code\n`this is invalid code.`; }}"
  assert "Could not parse handler code" in caplog.text


def test_handler_custom_fixme():
  attr = functionize_attribute("onClick", "((", fixme=" FIXME")
  assert attr.to_jsx() == "onClick={event => { // FIXME\n`((`; }}"


# --- Lists ---


def test_convert_attributes_preserves_order_and_length():
  attrs = [("class", "a"), ("tabindex", "2"), ("data-x", ""), ("hidden", "")]
  result = convert_attributes(attrs)
  assert [a.name for a in result] == ["className", "tabIndex", "data-x", "hidden"]
  assert result[1].value == NumberLiteral(2)


def test_convert_attributes_passes_options():
  result = convert_attributes([("onclick", "x = 1")], parameter="evt")
  assert result[0].to_jsx() == "onClick={evt => { x = 1; }}"


def test_convert_attributes_empty():
  assert convert_attributes([]) == []


def test_handler_newer_syntax_degrades_to_escape_hatch():
  """Syntax newer than ES2017 is outside the script parser and kept verbatim."""
  attr = functionize_attribute("onClick", "a?.b()")
  assert attr.value.body == [FixmeStatement(" TODO: Fix event handler code", "a?.b()")]
