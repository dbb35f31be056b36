"""
Convert Command Handler.

This module implements the logic for the `html-to-jsx convert` command:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Reading the markup from a file or standard input.
3. Running the `ConversionEngine`.
4. Writing the JSX to a file or standard output.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from html_to_jsx.config import ConverterConfig
from html_to_jsx.core.engine import ConversionEngine
from html_to_jsx.utils.console import log_error, log_success

STDIN = "-"


def handle_convert(input_path: str, output_path: Optional[Path], settings: Dict[str, Any]) -> int:
  """
  Handles the 'convert' command execution.

  Args:
      input_path: Path to the HTML file, or '-' for standard input.
      output_path: Path where the JSX should be saved. Printed when None.
      settings: Converter options given on the command line.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  from_stdin = input_path == STDIN
  source_file = Path(input_path)

  if not from_stdin and not source_file.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  search_path = Path.cwd() if from_stdin else source_file.parent
  try:
    config = ConverterConfig.load(overrides=settings, search_path=search_path)
  except ValidationError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  try:
    if from_stdin:
      html = sys.stdin.read()
    else:
      with open(source_file, "rt", encoding="utf-8") as f:
        html = f.read()
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read {input_path}: {e}")
    return 1

  result = ConversionEngine(config).run(html)

  if not result.success:
    for error in result.errors:
      log_error(f"Failed to convert {input_path}: {error}")
    return 1

  if output_path is None:
    print(result.code)
    return 0

  try:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wt", encoding="utf-8") as f:
      f.write(result.code + "\n")
  except OSError as e:
    log_error(f"Failed to write {output_path}: {e}")
    return 1

  log_success(f"Converted: {input_path} -> {output_path}")
  return 0
