"""
Dialect Selection.

Maps a destination file name to the dialect family and the engine parser used
to format it.
"""

from pathlib import PurePath
from typing import Dict, NamedTuple, Optional

from ui_splice.enums import Dialect


class DialectSpec(NamedTuple):
  dialect: Dialect
  parser: str


DEFAULT_DIALECT = DialectSpec(Dialect.SCRIPT, "babel")

EXTENSION_TABLE: Dict[str, DialectSpec] = {
  # Script
  ".js": DialectSpec(Dialect.SCRIPT, "babel"),
  ".jsx": DialectSpec(Dialect.SCRIPT, "babel"),
  ".mjs": DialectSpec(Dialect.SCRIPT, "babel"),
  ".cjs": DialectSpec(Dialect.SCRIPT, "babel"),
  ".ts": DialectSpec(Dialect.SCRIPT, "typescript"),
  ".tsx": DialectSpec(Dialect.SCRIPT, "typescript"),
  ".mts": DialectSpec(Dialect.SCRIPT, "typescript"),
  ".cts": DialectSpec(Dialect.SCRIPT, "typescript"),
  ".json": DialectSpec(Dialect.SCRIPT, "json"),
  # Markup
  ".html": DialectSpec(Dialect.MARKUP, "html"),
  ".htm": DialectSpec(Dialect.MARKUP, "html"),
  ".vue": DialectSpec(Dialect.MARKUP, "vue"),
  # Style
  ".css": DialectSpec(Dialect.STYLE, "css"),
  ".scss": DialectSpec(Dialect.STYLE, "scss"),
  ".less": DialectSpec(Dialect.STYLE, "less"),
  # Doc
  ".md": DialectSpec(Dialect.DOC, "markdown"),
  ".markdown": DialectSpec(Dialect.DOC, "markdown"),
  ".mdx": DialectSpec(Dialect.DOC, "mdx"),
  ".yaml": DialectSpec(Dialect.DOC, "yaml"),
  ".yml": DialectSpec(Dialect.DOC, "yaml"),
}


def select_dialect(file_name_hint: Optional[str]) -> DialectSpec:
  """
  Resolves the dialect for a file name.

  Args:
      file_name_hint: Destination file name or path (e.g. 'src/Card.tsx').

  Returns:
      DialectSpec: The mapped entry, or the script dialect for unknown extensions.
  """
  if not file_name_hint:
    return DEFAULT_DIALECT
  suffix = PurePath(file_name_hint).suffix.lower()
  return EXTENSION_TABLE.get(suffix, DEFAULT_DIALECT)
