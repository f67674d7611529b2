"""
Style Configuration Store.

Resolves the `StyleConfig` used by the formatter and the import renderer from
layered sources, lowest priority first:

1.  Built-in defaults.
2.  Style inferred from the destination file's existing text.
3.  The persisted per-user settings store (a generic key/value fetch).
4.  Explicit overrides passed with the request or on the command line.

Every source is best-effort: a missing store, an unknown key or an invalid
value falls back to the layer below without raising.
"""

import logging
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional, Protocol, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ui_splice.utils.console import log_warning

logger = logging.getLogger(__name__)

TOOL_SECTION = "ui_splice"

# Persisted-settings keys, in the camelCase form the editor stores them.
STYLE_KEYS: Dict[str, str] = {
  "tabWidth": "tab_width",
  "useTabs": "use_tabs",
  "singleQuote": "single_quote",
  "semi": "semi",
  "trailingComma": "trailing_comma",
  "bracketSpacing": "bracket_spacing",
  "printWidth": "print_width",
  "endOfLine": "end_of_line",
}


class StyleConfig(BaseModel):
  """
  Formatting options understood by the pretty-printing engine.
  """

  model_config = ConfigDict(frozen=True, populate_by_name=True)

  tab_width: int = Field(2, ge=1, le=16, alias="tabWidth", description="Spaces per indentation level.")
  use_tabs: bool = Field(False, alias="useTabs", description="Indent with tabs instead of spaces.")
  single_quote: bool = Field(True, alias="singleQuote", description="Prefer single quotes in script dialects.")
  semi: bool = Field(True, description="Terminate statements with semicolons.")
  trailing_comma: Literal["all", "es5", "none"] = Field("es5", alias="trailingComma")
  bracket_spacing: bool = Field(True, alias="bracketSpacing", description="Spaces inside object braces.")
  print_width: int = Field(80, ge=20, le=400, alias="printWidth", description="Wrap lines beyond this width.")
  end_of_line: Literal["lf", "crlf", "cr", "auto"] = Field("lf", alias="endOfLine")

  @property
  def quote(self) -> str:
    """The quote character emitted for module specifiers."""
    return "'" if self.single_quote else '"'

  def to_engine_args(self) -> List[str]:
    """
    Renders the options as Prettier command-line flags.

    Returns:
        List[str]: Flags in a stable order.
    """
    args = [
      f"--tab-width={self.tab_width}",
      f"--print-width={self.print_width}",
      f"--trailing-comma={self.trailing_comma}",
      f"--end-of-line={self.end_of_line}",
    ]
    if self.use_tabs:
      args.append("--use-tabs")
    if self.single_quote:
      args.append("--single-quote")
    if not self.semi:
      args.append("--no-semi")
    if not self.bracket_spacing:
      args.append("--no-bracket-spacing")
    return args

  def with_overrides(self, overrides: Optional[Mapping[str, Any]]) -> "StyleConfig":
    """
    Returns a copy with the recognised keys of `overrides` applied.

    Keys may be camelCase (`tabWidth`) or field names (`tab_width`). Unknown keys
    are ignored. A value that fails validation is dropped with a warning and the
    current value is kept.

    Args:
        overrides: Opaque key/value pairs, usually from a settings store.

    Returns:
        StyleConfig: The merged configuration.
    """
    if not overrides:
      return self

    current = self.model_dump()
    for key, value in overrides.items():
      field_name = STYLE_KEYS.get(key, key)
      if field_name not in current:
        logger.debug("Ignoring unknown style key %r", key)
        continue

      candidate = {**current, field_name: value}
      try:
        StyleConfig.model_validate(candidate)
      except ValidationError:
        log_warning(f"Ignoring invalid style value {key}={value!r}")
        continue
      current = candidate

    return StyleConfig.model_validate(current)


class SettingsStore(Protocol):
  """
  Generic key/value fetch over persisted per-user settings.
  """

  def get(self, key: str) -> Optional[Any]: ...


class MappingSettingsStore:
  """
  Settings store backed by an in-memory mapping.
  """

  def __init__(self, values: Optional[Mapping[str, Any]] = None):
    self._values = dict(values or {})

  def get(self, key: str) -> Optional[Any]:
    return self._values.get(key)


class TomlSettingsStore:
  """
  Settings store reading the `[tool.ui_splice.style]` table of the nearest
  `pyproject.toml`, searching from `start_path` upwards.
  """

  def __init__(self, start_path: Optional[Path] = None):
    self.start_path = start_path or Path.cwd()
    self._values: Optional[Dict[str, Any]] = None

  def get(self, key: str) -> Optional[Any]:
    if self._values is None:
      tool_config, _ = _load_toml_settings(self.start_path)
      style = tool_config.get("style", {})
      self._values = style if isinstance(style, dict) else {}
    return self._values.get(key)


def read_store(store: Optional[SettingsStore]) -> Dict[str, Any]:
  """
  Fetches every known style key from `store`.

  A store that raises is treated as absent.

  Args:
      store: The settings store, or None.

  Returns:
      Dict[str, Any]: camelCase keys to stored values; absent keys are omitted.
  """
  if store is None:
    return {}

  values: Dict[str, Any] = {}
  for key in STYLE_KEYS:
    try:
      value = store.get(key)
    except Exception as e:
      logger.debug("Settings store unavailable: %s", e)
      return {}
    if value is not None:
      values[key] = value
  return values


def infer_style(source_text: str) -> Dict[str, Any]:
  """
  Infers indentation, quote and semicolon conventions from existing code.

  The first indented line decides tabs versus spaces and the indent width.
  Quotes follow whichever of single or double quotes is more frequent. Any line
  ending in a semicolon turns semicolons on.

  Args:
      source_text: The destination file's current text.

  Returns:
      Dict[str, Any]: Inferred camelCase overrides. Empty for blank input.
  """
  if not source_text.strip():
    return {}

  inferred: Dict[str, Any] = {}
  for line in source_text.splitlines():
    if line.startswith("\t"):
      inferred["useTabs"] = True
      break
    if line.startswith("  "):
      indent = len(line) - len(line.lstrip(" "))
      inferred["useTabs"] = False
      inferred["tabWidth"] = min(indent, 8)
      break

  singles = source_text.count("'")
  doubles = source_text.count('"')
  if singles or doubles:
    inferred["singleQuote"] = singles > doubles

  inferred["semi"] = bool(re.search(r";[ \t]*$", source_text, re.MULTILINE))
  return inferred


def resolve_style(
  destination_text: Optional[str] = None,
  store: Optional[SettingsStore] = None,
  overrides: Optional[Mapping[str, Any]] = None,
) -> StyleConfig:
  """
  Builds the effective StyleConfig for one integration request.

  Args:
      destination_text: Current text of the destination file, if any.
      store: Persisted settings store, if any.
      overrides: Explicit request overrides.

  Returns:
      StyleConfig: Defaults < inferred < stored < overrides.
  """
  config = StyleConfig()
  if destination_text:
    config = config.with_overrides(infer_style(destination_text))
  config = config.with_overrides(read_store(store))
  return config.with_overrides(overrides)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for a 'pyproject.toml' and extracts the
  `[tool.ui_splice]` table.

  Args:
      start_path (Path): Directory to start the search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug("Unreadable %s: %s", toml_path, e)
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Types are inferred (int, float, bool, or string).

  Args:
      items (Optional[List[str]]): Raw CLI strings from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.
  """
  if not items:
    return {}

  config: Dict[str, Any] = {}
  for item in items:
    if "=" not in item:
      log_warning(f"Ignoring invalid option format: '{item}'. Expected 'key=value'.")
      continue

    key, val_str = item.split("=", 1)
    key = key.strip()
    val_str = val_str.strip()

    final_val: Any = val_str

    if val_str.lower() == "true":
      final_val = True
    elif val_str.lower() == "false":
      final_val = False
    else:
      try:
        if "." in val_str or "e" in val_str.lower():
          final_val = float(val_str)
        else:
          final_val = int(val_str)
      except ValueError:
        pass

    config[key] = final_val

  return config
