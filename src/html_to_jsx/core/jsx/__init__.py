"""
JSX Output Package.

This package contains the template tree produced by the builder and the
emitter that turns it into JSX source text.
"""

from html_to_jsx.core.jsx.nodes import (
  JsxNode,
  JsxAttribute,
  JsxElement,
  JsxRawTextElement,
  JsxExpressionSlot,
  JsxText,
  JsxFragment,
  ExpressionStatement,
  CommentBlock,
)
from html_to_jsx.core.jsx.emitter import JsxEmitter

__all__ = [
  "JsxNode",
  "JsxAttribute",
  "JsxElement",
  "JsxRawTextElement",
  "JsxExpressionSlot",
  "JsxText",
  "JsxFragment",
  "ExpressionStatement",
  "CommentBlock",
  "JsxEmitter",
]
