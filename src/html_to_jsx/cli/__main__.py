"""
Main Entry Point for html-to-jsx CLI.

This module handles argument parsing and dispatches to the command handlers
defined in `html_to_jsx.cli.handlers`.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from html_to_jsx import __version__
from html_to_jsx.cli import handlers
from html_to_jsx.config import parse_cli_key_values
from html_to_jsx.utils.console import console


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(prog="html-to-jsx", description="html-to-jsx: Convert HTML fragments to JSX")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CONVERT ---
  cmd_conv = subparsers.add_parser("convert", help="Convert an HTML file to JSX")
  cmd_conv.add_argument("path", help="Input HTML file, or '-' to read standard input")
  cmd_conv.add_argument("--out", type=Path, help="Output file (default: print to stdout)")
  cmd_conv.add_argument(
    "--config",
    nargs="*",
    help="Converter options in key=value format (e.g. merge_tags=false event_parameter=e)",
  )

  args = parser.parse_args(argv)

  console.configure_logging(logging.DEBUG if args.verbose else logging.INFO)

  if args.command == "convert":
    settings = parse_cli_key_values(args.config)
    return handlers.handle_convert(args.path, args.out, settings)

  return 1
