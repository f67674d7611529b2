"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Fake formatting engines and acquisition sources, so no test needs Node.js.
- Console capture for CLI and logging output.
"""

import asyncio
import sys
from pathlib import Path
from typing import Callable, List, Optional

import pytest
from rich.console import Console

# Add src to path so we can import 'ui_splice' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ui_splice.core.formatter import EngineUnavailableError, FormatterError  # noqa: E402
from ui_splice.utils.console import UI_THEME, reset_console, set_console  # noqa: E402


def canonicalize(text: str) -> str:
  """Toy formatter: trims trailing whitespace and ends with one newline."""
  lines = [line.rstrip() for line in text.strip("\n").split("\n")]
  return "\n".join(lines) + "\n"


class FakeEngine:
  """
  In-memory stand-in for Prettier.

  Records every call. Raises `FormatterError(fail_with)` when configured to.
  """

  def __init__(self, name: str = "fake", fail_with: Optional[str] = None):
    self.name = name
    self.fail_with = fail_with
    self.calls: List[tuple] = []

  async def format(self, text, parser, file_name, style):
    self.calls.append((text, parser, file_name, style))
    if self.fail_with is not None:
      raise FormatterError(self.fail_with)
    return canonicalize(text)


class FakeSource:
  """
  Acquisition source counting its attempts.

  Sleeps `delay` seconds, then raises `error` or returns `engine`.
  """

  def __init__(self, engine=None, error: Optional[Exception] = None, delay: float = 0.0, timeout: float = 1.0, name="fake"):
    self.engine = engine
    self.error = error
    self.delay = delay
    self.timeout = timeout
    self.name = name
    self.attempts = 0

  async def acquire(self):
    self.attempts += 1
    if self.delay:
      await asyncio.sleep(self.delay)
    if self.error is not None:
      raise self.error
    if self.engine is None:
      raise EngineUnavailableError(f"{self.name} has no engine")
    return self.engine


@pytest.fixture
def fake_engine() -> FakeEngine:
  """A fake engine that formats successfully."""
  return FakeEngine()


@pytest.fixture
def make_source() -> Callable[..., FakeSource]:
  """Factory for FakeSource instances."""
  return FakeSource


@pytest.fixture
def make_engine() -> Callable[..., FakeEngine]:
  """Factory for FakeEngine instances."""
  return FakeEngine


@pytest.fixture
def recorded_console():
  """
  Redirects console and logging output to an in-memory Rich console.

  Yields:
      Console: The recording console; read it back with `export_text()`.
  """
  rec = Console(record=True, width=200, theme=UI_THEME)
  set_console(rec)
  yield rec
  reset_console()
