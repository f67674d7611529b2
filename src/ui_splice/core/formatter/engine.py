"""
Pretty-printing Engine Handle and Acquisition Sources.

The engine is the Prettier command-line tool driven over stdin/stdout. It can be
reached two ways, tried in order by the normalizer:

1.  **LocalPrettierSource**: a `node_modules/.bin/prettier` found by walking up
    from a search root, or a `prettier` executable on `PATH`.
2.  **RemotePrettierSource**: `npx --yes prettier@<version>`, which fetches the
    package from the npm registry on first use.

Each source probes its command with `--version` under a timeout and either
returns a ready `PrettierEngine` or raises `EngineUnavailableError`.
"""

import asyncio
import logging
import shutil
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from ui_splice.config import StyleConfig

logger = logging.getLogger(__name__)

DEFAULT_PRETTIER_VERSION = "3"


class EngineUnavailableError(RuntimeError):
  """No usable engine could be acquired from a source."""


class FormatterError(RuntimeError):
  """The engine rejected the input text."""


class FormattingEngine(Protocol):
  """
  Anything able to canonicalize text for a parser and a style.
  """

  name: str

  async def format(self, text: str, parser: str, file_name: str, style: StyleConfig) -> str: ...


class EngineSource(Protocol):
  """
  One way of acquiring a FormattingEngine.
  """

  name: str
  timeout: float

  async def acquire(self) -> FormattingEngine: ...


async def _run(cmd: Sequence[str], stdin_text: Optional[str], timeout: float) -> tuple:
  """
  Runs a command with optional stdin and a hard timeout.

  Args:
      cmd: Executable and arguments.
      stdin_text: Text piped to the process, or None.
      timeout: Seconds before the process is killed.

  Returns:
      tuple: (returncode, stdout, stderr) with decoded text.

  Raises:
      asyncio.TimeoutError: If the process exceeds the timeout.
      OSError: If the executable cannot be started.
  """
  proc = await asyncio.create_subprocess_exec(
    *cmd,
    stdin=asyncio.subprocess.PIPE if stdin_text is not None else asyncio.subprocess.DEVNULL,
    stdout=asyncio.subprocess.PIPE,
    stderr=asyncio.subprocess.PIPE,
  )
  payload = stdin_text.encode("utf-8") if stdin_text is not None else None
  try:
    out, err = await asyncio.wait_for(proc.communicate(payload), timeout=timeout)
  except asyncio.TimeoutError:
    proc.kill()
    await proc.wait()
    raise
  return proc.returncode, out.decode("utf-8", "replace"), err.decode("utf-8", "replace")


class PrettierEngine:
  """
  A resolved Prettier command.
  """

  def __init__(self, command: List[str], version: str, name: str = "prettier", timeout: float = 30.0):
    """
    Args:
        command: Argument vector prefix invoking Prettier (e.g. ['npx', '--yes', 'prettier@3']).
        version: Version string reported by the probe.
        name: Label of the source that produced this handle.
        timeout: Per-call formatting timeout in seconds.
    """
    self.command = list(command)
    self.version = version
    self.name = name
    self.timeout = timeout

  def __repr__(self) -> str:
    return f"PrettierEngine({' '.join(self.command)!r}, version={self.version!r})"

  async def format(self, text: str, parser: str, file_name: str, style: StyleConfig) -> str:
    """
    Formats `text` through the engine.

    Args:
        text: Source text.
        parser: Engine parser name (e.g. 'typescript').
        file_name: Path used for `--stdin-filepath` so plugins resolve correctly.
        style: Formatting options.

    Returns:
        str: The formatted text.

    Raises:
        FormatterError: If the engine rejects the text, times out, or cannot be run.
    """
    cmd = [*self.command, f"--parser={parser}", f"--stdin-filepath={file_name}", *style.to_engine_args()]
    try:
      code, out, err = await _run(cmd, text, self.timeout)
    except asyncio.TimeoutError:
      raise FormatterError(f"Formatting timed out after {self.timeout:g}s")
    except OSError as e:
      raise FormatterError(f"Formatting engine could not be started: {e}")

    if code != 0:
      raise FormatterError(err.strip() or f"Formatting engine exited with status {code}")
    return out


async def _probe(command: List[str], timeout: float) -> str:
  try:
    code, out, err = await _run([*command, "--version"], None, timeout)
  except asyncio.TimeoutError:
    raise EngineUnavailableError(f"'{' '.join(command)}' did not answer within {timeout:g}s")
  except OSError as e:
    raise EngineUnavailableError(f"'{' '.join(command)}' could not be started: {e}")
  if code != 0:
    raise EngineUnavailableError(f"'{' '.join(command)}' exited with status {code}: {err.strip()}")
  return out.strip()


class LocalPrettierSource:
  """
  Acquires Prettier from the project's `node_modules` or from `PATH`.
  """

  name = "local"

  def __init__(self, search_root: Optional[Path] = None, timeout: float = 20.0):
    self.search_root = search_root or Path.cwd()
    self.timeout = timeout

  def find_executable(self) -> Optional[Path]:
    """
    Locates a Prettier executable.

    Returns:
        Optional[Path]: The first `node_modules/.bin/prettier` found walking up
        from the search root, else the one on PATH, else None.
    """
    current = self.search_root.resolve()
    for parent in [current, *current.parents]:
      for name in ("prettier", "prettier.cmd"):
        candidate = parent / "node_modules" / ".bin" / name
        if candidate.is_file():
          return candidate

    on_path = shutil.which("prettier")
    return Path(on_path) if on_path else None

  async def acquire(self) -> PrettierEngine:
    executable = self.find_executable()
    if executable is None:
      raise EngineUnavailableError("No local Prettier executable found")
    command = [str(executable)]
    version = await _probe(command, self.timeout)
    return PrettierEngine(command, version, name=self.name)


class RemotePrettierSource:
  """
  Acquires Prettier through `npx`, downloading it from the registry if needed.
  """

  name = "remote"

  def __init__(self, version: str = DEFAULT_PRETTIER_VERSION, timeout: float = 60.0):
    self.version = version
    self.timeout = timeout

  async def acquire(self) -> PrettierEngine:
    npx = shutil.which("npx")
    if npx is None:
      raise EngineUnavailableError("npx is not available for a remote Prettier fetch")
    command = [npx, "--yes", f"prettier@{self.version}"]
    version = await _probe(command, self.timeout)
    return PrettierEngine(command, version, name=self.name)


def default_sources(search_root: Optional[Path] = None) -> List[EngineSource]:
  """
  The standard acquisition order: local first, then remote.

  Args:
      search_root: Directory to start the node_modules search from.

  Returns:
      List[EngineSource]: Sources in priority order.
  """
  return [LocalPrettierSource(search_root), RemotePrettierSource()]
