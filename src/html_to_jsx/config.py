"""
Runtime Configuration Store.

Options are resolved from, in increasing priority: model defaults, the
``[tool.html_to_jsx]`` table of the nearest ``pyproject.toml``, and explicit
arguments (CLI flags or API keywords).
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

logger = logging.getLogger(__name__)

TOOL_SECTION = "html_to_jsx"


class ConverterConfig(BaseModel):
  """
  Global configuration container for the conversion engine.
  """

  merge_tags: bool = Field(True, description="Split text nodes on brace-delimited merge tags.")
  merge_tag_marker: str = Field("$merge: ", description="Prefix written into the comment of a merge-tag slot.")
  event_parameter: str = Field("event", description="Parameter name of functionized event handlers.")
  handler_fixme: str = Field(
    " TODO: Fix event handler code",
    description="Comment placed before handler code that could not be parsed.",
  )
  max_depth: int = Field(200, description="Deepest element nesting accepted before failing.")

  @field_validator("max_depth")
  @classmethod
  def validate_depth(cls, v: int) -> int:
    """
    Ensures the nesting bound is usable.

    Raises:
        ValueError: If the bound is below 1.
    """
    if v < 1:
      raise ValueError(f"max_depth must be at least 1, got {v}")
    return v

  @field_validator("event_parameter")
  @classmethod
  def validate_parameter(cls, v: str) -> str:
    v_clean = v.strip()
    if not v_clean.isidentifier():
      raise ValueError(f"event_parameter must be an identifier, got '{v}'")
    return v_clean

  @classmethod
  def load(cls, overrides: Optional[Dict[str, Any]] = None, search_path: Optional[Path] = None) -> "ConverterConfig":
    """
    Loads configuration from pyproject.toml and applies overrides.

    Args:
        overrides (Optional[Dict]): Values that win over the TOML settings.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        ConverterConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)
    if toml_dir:
      logger.debug("Using [tool.%s] from %s", TOOL_SECTION, toml_dir / "pyproject.toml")

    return cls(**{**toml_config, **(overrides or {})})


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the directory and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring unreadable %s: %s", toml_path, e)
        return {}, None

      section = data.get("tool", {}).get(TOOL_SECTION, {})
      return section, parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Types are inferred (bool, int, float, or string).

  Args:
      items (Optional[List[str]]): List of raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.
  """
  if not items:
    return {}

  config: Dict[str, Any] = {}
  for item in items:
    if "=" not in item:
      logger.warning("Ignoring invalid config format: '%s'. Expected 'key=value'.", item)
      continue

    key, val_str = item.split("=", 1)
    key = key.strip()

    final_val: Any = val_str

    if val_str.strip().lower() == "true":
      final_val = True
    elif val_str.strip().lower() == "false":
      final_val = False
    else:
      try:
        final_val = int(val_str)
      except ValueError:
        try:
          final_val = float(val_str)
        except ValueError:
          pass

    config[key] = final_val

  return config
