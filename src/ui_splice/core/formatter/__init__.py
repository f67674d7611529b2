"""
Style Normalizer Package.

Canonicalizes generated source text through an external pretty-printing engine:

- ``dialects``: file-extension to dialect/parser table.
- ``engine``: the Prettier handle and its local/remote acquisition sources.
- ``repair``: lexical repair of text the engine rejected.
- ``normalizer``: the cached-engine ``StyleNormalizer`` entry point.
"""

from ui_splice.core.formatter.dialects import DialectSpec, select_dialect
from ui_splice.core.formatter.engine import (
  EngineUnavailableError,
  FormatterError,
  LocalPrettierSource,
  PrettierEngine,
  RemotePrettierSource,
)
from ui_splice.core.formatter.normalizer import ENGINE_UNAVAILABLE_MESSAGE, FormatResult, StyleNormalizer

__all__ = [
  "DialectSpec",
  "ENGINE_UNAVAILABLE_MESSAGE",
  "EngineUnavailableError",
  "FormatResult",
  "FormatterError",
  "LocalPrettierSource",
  "PrettierEngine",
  "RemotePrettierSource",
  "StyleNormalizer",
  "select_dialect",
]
