"""
Central Logging and Console Utilities.

All user-facing output of ui-splice goes through the Python standard `logging`
library, rendered by `rich`.

The module provides:
1.  **Logging Integration**: A `RichHandler` attached to the root logger plus the
    helpers `log_info`, `log_success`, `log_warning` and `log_error`.
2.  **Swappable Console**: A proxy around the Rich Console so the CLI, an editor
    host, or a test can redirect output (for example to an in-memory buffer via
    `set_console`) without re-importing anything.

Attributes:
    console (_ConsoleProxy): Stable reference to the active Rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Between INFO (20) and WARNING (30)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

UI_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "rule": "bold magenta",
    "score.good": "green",
    "score.fair": "yellow",
    "score.poor": "bold red",
  }
)


class _ConsoleProxy:
  """
  Forwards printing to a replaceable `rich.console.Console` backend.

  Swapping the backend also re-points the logging handler so that
  `logging.info(...)` lands in the same destination as `console.print(...)`.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=UI_THEME)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The Rich Console to write to from now on.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Restores a fresh standard output console."""
    self._backend = Console(theme=UI_THEME)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """The currently active Console."""
    return self._backend

  def _configure_logging(self) -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )

    if root_logger.level == logging.NOTSET or root_logger.level > logging.INFO:
      root_logger.setLevel(logging.INFO)
    root_logger.addHandler(rich_handler)

  def print(self, *args: Any, **kwargs: Any) -> None:
    """Forwards `print` calls to the active backend."""
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """
    Forwards `export_text`, used to read back captured output.

    Args:
        **kwargs: Options passed to `Console.export_text`.

    Returns:
        str: The captured text.
    """
    return self._backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Redirects console and logging output to `new_console`.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Resets logging and console output to standard output."""
  console.reset()


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): The message. May contain rich markup such as [bold].
  """
  logging.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  """
  Logs a success message at the custom SUCCESS level.

  Args:
      msg (str): The message.
  """
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message.

  Args:
      msg (str): The message.
  """
  logging.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  """
  Logs an error message.

  Args:
      msg (str): The message.
  """
  logging.error(f"❌ {msg}", extra={"markup": True})


def format_score(label: str, score: int) -> str:
  """
  Renders a 0-100 score as themed markup.

  Args:
      label (str): Score name, e.g. 'Accessibility'.
      score (int): The score.

  Returns:
      str: Markup such as '[score.good]Accessibility: 95/100[/score.good]'.
  """
  if score >= 90:
    style = "score.good"
  elif score >= 70:
    style = "score.fair"
  else:
    style = "score.poor"
  return f"[{style}]{label}: {score}/100[/{style}]"
