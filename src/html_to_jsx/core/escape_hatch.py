"""
Escape Hatch Mechanism for Untranslatable Handler Code.

Inline event-handler code that cannot be parsed is never dropped and never
aborts the conversion. It is kept verbatim inside a template literal and
flagged with a marker comment so the author can fix it by hand:

    onClick={event => { // TODO: Fix event handler code
    `this is invalid code.`; }}
"""

import logging

from html_to_jsx.core.jsx.nodes import FixmeStatement

logger = logging.getLogger(__name__)


class EscapeHatch:
  """
  Handles the "Pass-Through" Protocol for handler code.
  """

  MARKER = " TODO: Fix event handler code"

  @staticmethod
  def mark_failure(raw: str, reason: str, marker: str = MARKER) -> FixmeStatement:
    """
    Wraps unparseable code in a flagged, inert statement.

    Args:
        raw: The original handler source, preserved verbatim.
        reason: Human-readable explanation of the failure (logged only).
        marker: Comment text placed before the preserved code.

    Returns:
        FixmeStatement: The statement to use as the handler body.
    """
    logger.warning("Could not parse handler code %r: %s", raw, reason)
    return FixmeStatement(comment=marker, raw=raw)
