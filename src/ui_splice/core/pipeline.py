"""
Integration Pipeline.

This module provides the `IntegrationPipeline`, the entry point that prepares a
generated component for insertion into a destination file.

The pipeline runs four phases over each request:

1.  **Style Resolution**: defaults, then the destination file's inferred style,
    then the persisted settings store, then explicit request overrides.
2.  **Normalization**: the `StyleNormalizer` formats the text. If the engine is
    unavailable or rejects the text, the pipeline continues with the
    unformatted original and records the error in the report.
3.  **Quality**: the `QualityOptimizer` scores the text and applies the
    automatic fixes.
4.  **Import Resolution**: the `ImportEngine` parses the remediated text's
    imports, merges them with the destination file's imports, prunes unused
    bindings, adds the implicit framework needs and renders the canonical block.

No phase raises; every request yields an `IntegrationResult`.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ui_splice.config import SettingsStore, StyleConfig, resolve_style
from ui_splice.core.formatter import StyleNormalizer
from ui_splice.core.imports import ImportDeclaration, ImportEngine
from ui_splice.core.quality import CodeSize, Finding, QualityOptimizer

logger = logging.getLogger(__name__)


class IntegrationRequest(BaseModel):
  """
  One generated component to integrate.
  """

  source_text: str = Field(..., description="Raw generated component text.")
  file_name_hint: Optional[str] = Field(None, description="Destination file name; selects the dialect.")
  destination_text: Optional[str] = Field(None, description="Current text of the destination file.")
  style_overrides: Dict[str, Any] = Field(default_factory=dict, description="Explicit style options.")


class IntegrationReport(BaseModel):
  """
  Structured summary returned alongside the final text.
  """

  accessibility_score: int
  performance_score: int
  findings: List[Finding] = Field(default_factory=list)
  applied_fixes: List[str] = Field(default_factory=list)
  merged_import_block: str = ""
  size_delta: CodeSize
  formatted: bool = Field(False, description="True if the engine formatted the text.")
  format_error: Optional[str] = None
  format_suggestions: List[str] = Field(default_factory=list)


class IntegrationResult(BaseModel):
  """
  Final text ready for insertion, plus its report.
  """

  final_text: str
  report: IntegrationReport
  style: StyleConfig


class IntegrationPipeline:
  """
  Composes the normalizer, the quality optimizer and the import engine.

  Each component is constructed once and shared by all requests; only the
  normalizer keeps state (its cached engine handle).
  """

  def __init__(
    self,
    normalizer: Optional[StyleNormalizer] = None,
    optimizer: Optional[QualityOptimizer] = None,
    imports: Optional[ImportEngine] = None,
    settings: Optional[SettingsStore] = None,
  ):
    """
    Args:
        normalizer: Style normalizer. Defaults to local-then-remote Prettier.
        optimizer: Quality optimizer. Defaults to the full rule registry, wrapping
            components in the import engine's memo helper.
        imports: Import engine. Defaults to the 'react' framework package.
        settings: Persisted style settings store, if any.
    """
    self.normalizer = normalizer or StyleNormalizer()
    self.imports = imports or ImportEngine()
    self.optimizer = optimizer or QualityOptimizer(memo_wrapper=self.imports.memo_wrapper)
    self.settings = settings

  def resolve_style(self, request: IntegrationRequest) -> StyleConfig:
    """Resolves the layered StyleConfig for `request`."""
    return resolve_style(request.destination_text, self.settings, request.style_overrides)

  async def integrate(self, request: IntegrationRequest) -> IntegrationResult:
    """
    Runs the full pipeline for one request.

    Args:
        request: The generated text and its destination context.

    Returns:
        IntegrationResult: Final text and report.
    """
    style = self.resolve_style(request)

    # 1. Normalize
    formatted = await self.normalizer.format(request.source_text, request.file_name_hint, style)
    if formatted.success and formatted.formatted_text is not None:
      text = formatted.formatted_text
    else:
      logger.info("Proceeding without formatting: %s", formatted.error)
      text = request.source_text

    # 2. Analyze & remediate
    optimization = self.optimizer.optimize_component(text)

    # 3. Resolve imports
    block, body = self.resolve_imports(optimization.optimized_code, request.destination_text, style)
    final_text = f"{block}\n\n{body}" if block else body

    report = IntegrationReport(
      accessibility_score=optimization.accessibility_score,
      performance_score=optimization.performance_score,
      findings=optimization.findings,
      applied_fixes=optimization.improvements,
      merged_import_block=block,
      size_delta=optimization.code_size,
      formatted=formatted.success,
      format_error=formatted.error,
      format_suggestions=formatted.suggestions,
    )
    return IntegrationResult(final_text=final_text, report=report, style=style)

  def integrate_sync(self, request: IntegrationRequest) -> IntegrationResult:
    """Runs `integrate` on a fresh event loop, for synchronous callers."""
    return asyncio.run(self.integrate(request))

  def resolve_imports(
    self,
    code: str,
    destination_text: Optional[str] = None,
    style: Optional[StyleConfig] = None,
  ) -> tuple:
    """
    Produces the merged import block for `code` and its body text.

    Args:
        code: Remediated component text.
        destination_text: Current destination file text, if any.
        style: Rendering style.

    Returns:
        tuple: (rendered import block, component body without its imports).
    """
    engine = self.imports
    body = engine.split_body(code)

    incoming: List[ImportDeclaration] = engine.parse(code)

    existing: List[ImportDeclaration] = []
    usage_text = body
    if destination_text:
      existing = engine.parse(destination_text)
      usage_text = f"{body}\n{engine.split_body(destination_text)}"

    pruned = engine.prune_unused(engine.merge(existing, incoming), usage_text)

    # Inferred needs come from usage already; markup needs the framework default
    # even though the body never names it.
    inferred = engine.infer_framework_needs(body)
    if inferred is not None:
      pruned = engine.merge(pruned, [inferred])
    return engine.render(pruned, style), body
