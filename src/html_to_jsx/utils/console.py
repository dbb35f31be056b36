"""
Diagnostics Console.

Converted JSX is written to standard output by the CLI. Everything else
(progress, failures, handler warnings raised inside the pipeline) goes
through the standard `logging` library, rendered by a `rich` handler onto a
stderr console.

The console sits behind a proxy so its destination can be replaced at runtime
with `set_console` (for example an in-memory buffer in tests) without
re-importing modules that hold a reference to `console`.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Between INFO and WARNING
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "warning": "yellow",
    "error": "bold red",
  }
)


def _stderr_console() -> Console:
  return Console(theme=_THEME, stderr=True)


class _ConsoleProxy:
  """
  Forwards to the active Rich console and keeps the root logging handler
  pointed at it.
  """

  def __init__(self) -> None:
    self._backend: Console = _stderr_console()
    self._configured = False

  @property
  def backend(self) -> Console:
    return self._backend

  def set_backend(self, new_console: Console) -> None:
    self._backend = new_console
    self.configure_logging()

  def reset(self) -> None:
    self._backend = _stderr_console()
    if self._configured:
      self.configure_logging()

  def configure_logging(self, level: int = logging.INFO) -> None:
    """
    Installs a single RichHandler on the root logger, bound to the current
    backend. Any previously installed RichHandler is removed.

    Args:
        level (int): Root logger level.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    # Messages carry user markup (tags, braces) that must not be read as rich markup
    handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=False,
      rich_tracebacks=True,
    )
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    self._configured = True

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Redirects console output and logging to `new_console`.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  console.reset()


def get_console() -> Console:
  return console.backend


def log_success(msg: str) -> None:
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}")


def log_error(msg: str) -> None:
  logging.error(f"❌ {msg}")
