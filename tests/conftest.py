"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so CLI tests do not leak logging handlers.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'html_to_jsx' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from html_to_jsx.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """
  Restores the default console after each test.
  """
  yield
  reset_console()
