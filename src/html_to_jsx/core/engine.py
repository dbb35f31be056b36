"""
Orchestration Engine for HTML to JSX conversion.

This module provides the `ConversionEngine`, the primary driver of a
conversion. The pipeline consists of:

1.  **Parsing**: the trimmed markup is parsed into a node tree.
2.  **Building**: the `JsxBuilder` walks the tree, converting attributes and
    splitting text on merge tags.
3.  **Emission**: the `JsxEmitter` renders the resulting statement.

Fatal problems (unsupported nodes, empty output) are reported through a failed
`ConversionResult`. Handler code that could not be parsed is not fatal: it is
preserved behind a marker comment and reported as a warning.
"""

import logging
from typing import List, Optional

from html_to_jsx.config import ConverterConfig
from html_to_jsx.core.builder import JsxBuilder
from html_to_jsx.core.conversion_result import ConversionResult
from html_to_jsx.core.exceptions import HtmlToJsxError
from html_to_jsx.core.html.parser import parse_fragment
from html_to_jsx.core.jsx.emitter import JsxEmitter

logger = logging.getLogger(__name__)


class _WarningCollector(logging.Handler):
  """Captures warnings logged by the pipeline during a single run."""

  def __init__(self) -> None:
    super().__init__(level=logging.WARNING)
    self.messages: List[str] = []

  def emit(self, record: logging.LogRecord) -> None:
    self.messages.append(record.getMessage())


class ConversionEngine:
  """
  The main conversion unit.

  Holds the configuration and runs the parse, build and emit phases for one
  markup string at a time.
  """

  def __init__(self, config: Optional[ConverterConfig] = None) -> None:
    """
    Initializes the Engine.

    Args:
        config (ConverterConfig, optional): Conversion options. Defaults are
            used when omitted.
    """
    self.config = config or ConverterConfig()
    self.builder = JsxBuilder(self.config)
    self.emitter = JsxEmitter()

  def convert(self, html: str) -> str:
    """
    Converts markup to JSX, raising on failure.

    Args:
        html (str): The markup fragment.

    Returns:
        str: The JSX source.

    Raises:
        HtmlToJsxError: If the markup cannot be represented as JSX.
    """
    fragment = parse_fragment(html.strip())
    statement = self.builder.build(fragment)
    return self.emitter.emit(statement)

  def run(self, html: str) -> ConversionResult:
    """
    Executes the full conversion pipeline.

    Args:
        html (str): The input markup.

    Returns:
        ConversionResult: Object containing the JSX source and error logs.
    """
    logger.debug("Converting %d characters of markup", len(html))

    collector = _WarningCollector()
    pipeline_logger = logging.getLogger("html_to_jsx")
    pipeline_logger.addHandler(collector)
    try:
      code = self.convert(html)
    except HtmlToJsxError as e:
      logger.debug("Conversion failed: %s", e)
      return ConversionResult(code="", errors=[str(e)], warnings=collector.messages, success=False)
    finally:
      pipeline_logger.removeHandler(collector)

    return ConversionResult(code=code, warnings=collector.messages)
