"""
Style Normalizer.

Canonicalizes generated source text with the pretty-printing engine.

The engine handle is acquired lazily on first use and cached on the normalizer
instance. Concurrent first callers all await one shared in-flight acquisition
task, so sources are probed at most once per instance. The settled outcome,
success or failure, is kept for the life of the instance; a fresh instance
retries.

`format` never raises. Failures come back as a `FormatResult` with
`success=False`:

- **Engine unavailable**: a stable error message and nothing else.
- **Format failure**: the engine's error, a best-effort repaired candidate in
  `formatted_text`, and suggestions. The caller chooses whether to use the
  candidate or proceed with the original text.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from ui_splice.config import StyleConfig
from ui_splice.core.formatter.dialects import select_dialect
from ui_splice.core.formatter.engine import (
  EngineSource,
  EngineUnavailableError,
  FormattingEngine,
  default_sources,
)
from ui_splice.core.formatter.repair import repair_candidate, suggest_fixes
from ui_splice.enums import Dialect

logger = logging.getLogger(__name__)

ENGINE_UNAVAILABLE_MESSAGE = "Formatting engine unavailable: no Prettier executable could be acquired"

_FALLBACK_FILE_NAMES = {
  Dialect.SCRIPT: "component.jsx",
  Dialect.MARKUP: "component.html",
  Dialect.STYLE: "component.css",
  Dialect.DOC: "component.md",
}


class FormatResult(BaseModel):
  """
  Outcome of a single `format` call.
  """

  success: bool = Field(..., description="True if the engine accepted and formatted the text.")
  formatted_text: Optional[str] = Field(
    None, description="Formatted text on success, the repaired candidate on a format failure."
  )
  error: Optional[str] = Field(None, description="Engine or acquisition error message.")
  suggestions: List[str] = Field(default_factory=list, description="Human-readable repair hints.")
  dialect: Dialect = Field(Dialect.SCRIPT, description="Dialect selected from the file name hint.")
  parser: str = Field("babel", description="Engine parser used for the dialect.")
  engine: Optional[str] = Field(None, description="Name of the source the engine was acquired from.")


class StyleNormalizer:
  """
  Formats text per dialect through a lazily acquired, cached engine.
  """

  def __init__(self, sources: Optional[Sequence[EngineSource]] = None):
    """
    Args:
        sources: Acquisition sources in priority order. Defaults to local
            Prettier followed by a remote `npx` fetch.
    """
    self.sources: List[EngineSource] = list(sources) if sources is not None else default_sources()
    self._engine: Optional[FormattingEngine] = None
    self._settled = False
    self._acquisition: Optional["asyncio.Future[Optional[FormattingEngine]]"] = None

  @property
  def acquisition_timeout(self) -> float:
    """Upper bound in seconds on a full acquisition attempt."""
    return sum(source.timeout for source in self.sources)

  async def get_engine(self) -> Optional[FormattingEngine]:
    """
    Returns the cached engine, acquiring it on first use.

    Returns:
        Optional[FormattingEngine]: The engine, or None if no source succeeded.
    """
    if self._settled:
      return self._engine

    # A task left behind by a closed event loop is discarded and restarted.
    if self._acquisition is not None and self._acquisition.cancelled():
      self._acquisition = None

    if self._acquisition is None:
      self._acquisition = asyncio.ensure_future(self._acquire())

    return await asyncio.shield(self._acquisition)

  async def _acquire(self) -> Optional[FormattingEngine]:
    for source in self.sources:
      try:
        engine = await asyncio.wait_for(source.acquire(), timeout=source.timeout)
      except asyncio.TimeoutError:
        logger.warning("Engine source '%s' timed out after %ss", source.name, source.timeout)
        continue
      except EngineUnavailableError as e:
        logger.info("Engine source '%s' unavailable: %s", source.name, e)
        continue
      except Exception as e:
        logger.warning("Engine source '%s' failed: %s", source.name, e)
        continue

      logger.info("Acquired formatting engine from '%s' source", source.name)
      self._engine = engine
      self._settled = True
      return engine

    self._settled = True
    return None

  async def format(
    self,
    source_text: str,
    file_name_hint: Optional[str] = None,
    style_config: Optional[StyleConfig] = None,
  ) -> FormatResult:
    """
    Formats `source_text` for the dialect implied by `file_name_hint`.

    Args:
        source_text: Raw text to canonicalize.
        file_name_hint: Destination file name; selects the dialect.
        style_config: Formatting options. Defaults to `StyleConfig()`.

    Returns:
        FormatResult: Success with the formatted text, or a structured failure.
    """
    spec = select_dialect(file_name_hint)
    style = style_config or StyleConfig()
    base = {"dialect": spec.dialect, "parser": spec.parser}

    engine = await self.get_engine()
    if engine is None:
      return FormatResult(success=False, error=ENGINE_UNAVAILABLE_MESSAGE, **base)

    file_name = file_name_hint or _FALLBACK_FILE_NAMES[spec.dialect]
    try:
      formatted = await engine.format(source_text, spec.parser, file_name, style)
    except Exception as e:
      message = str(e) or e.__class__.__name__
      logger.debug("Formatting failed for %s: %s", file_name, message)
      return FormatResult(
        success=False,
        formatted_text=repair_candidate(source_text),
        error=message,
        suggestions=suggest_fixes(message),
        engine=engine.name,
        **base,
      )

    return FormatResult(success=True, formatted_text=formatted, engine=engine.name, **base)
