"""
Entry point for module execution (``python -m html_to_jsx``).

This module delegates execution to the CLI handler in ``html_to_jsx.cli.__main__``.
"""

import sys
from html_to_jsx.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
