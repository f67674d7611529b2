"""
Imports Command Handler.

Prints the canonical import block a component would receive, optionally merged
with a destination file's existing imports.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ui_splice.config import TomlSettingsStore, resolve_style
from ui_splice.core.imports import ImportEngine
from ui_splice.core.pipeline import IntegrationPipeline
from ui_splice.utils.console import log_error, log_info


def handle_imports(
  path: Path,
  destination: Optional[Path] = None,
  framework: str = "react",
  style_overrides: Optional[Dict[str, Any]] = None,
  show_needs: bool = False,
) -> int:
  """
  Handles the 'imports' command execution.

  Args:
      path: Component file whose imports to resolve.
      destination: Existing file to merge with, if any.
      framework: Module id of the UI framework package.
      style_overrides: Style options from `--style key=value`.
      show_needs: Also report the hooks and libraries the component calls.

  Returns:
      int: Exit code.
  """
  if not path.is_file():
    log_error(f"Input not found: {path}")
    return 1

  destination_text = None
  if destination is not None and destination.is_file():
    destination_text = destination.read_text(encoding="utf-8")

  style = resolve_style(destination_text, TomlSettingsStore(path.parent), style_overrides)
  pipeline = IntegrationPipeline(imports=ImportEngine(framework_package=framework), settings=None)
  code = path.read_text(encoding="utf-8")
  block, _ = pipeline.resolve_imports(code, destination_text, style)

  if show_needs:
    needs = pipeline.imports.analyze_import_needs(code)
    log_info(f"Detected usage: {', '.join(needs) if needs else 'none'}")

  if not block:
    log_info("No imports required.")
    return 0

  print(block)
  return 0
