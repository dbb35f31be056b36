"""
Bindings to the parsers and encoders the converter relies on.

- ``entities``: HTML entity encoding for JSX text.
- ``style``: inline CSS declaration parsing (tinycss2).
- ``script``: inline event-handler code parsing (esprima).
"""

from html_to_jsx.core.external.entities import encode_text
from html_to_jsx.core.external.script import Statement, parse_statements
from html_to_jsx.core.external.style import parse_style_declarations

__all__ = ["encode_text", "Statement", "parse_statements", "parse_style_declarations"]
