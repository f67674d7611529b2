"""
Data structures produced by the quality analyzer.

- `Finding`: one defect instance reported by one rule.
- `ScoringPolicy`: per-severity penalties used to turn findings into scores.
- `OptimizationResult`: the end-to-end output of `optimize_component`.
"""

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ui_splice.enums import Category, ConformanceLevel, ImpactKind, Severity


class Finding(BaseModel):
  """
  A single detected defect. Immutable once emitted.
  """

  model_config = ConfigDict(frozen=True)

  category: Category
  severity: Severity
  rule_id: str = Field(..., description="Identifier of the rule that fired (e.g. 'img-alt').")
  description: str = Field(..., description="What is wrong.")
  located_snippet: str = Field(..., description="The offending markup, or a summary of where it occurs.")
  suggested_fix: str = Field(..., description="How to resolve it.")
  conformance_level: Optional[ConformanceLevel] = Field(None, description="WCAG level for accessibility rules.")
  impact_kind: Optional[ImpactKind] = Field(None, description="Affected runtime area for performance rules.")
  impact: Optional[str] = Field(None, description="Consequence of leaving a performance issue unfixed.")
  fix_id: Optional[str] = Field(None, description="Auto-remediation that resolves it, if any (e.g. 'image-alt').")


def _default_weights() -> Dict[Category, Dict[Severity, int]]:
  return {
    Category.ACCESSIBILITY: {Severity.ERROR: 10, Severity.WARNING: 5, Severity.INFO: 0},
    Category.PERFORMANCE: {Severity.HIGH: 15, Severity.MEDIUM: 10, Severity.LOW: 5},
  }


class ScoringPolicy(BaseModel):
  """
  Penalty weights per category and severity.

  A score starts at `ceiling` and loses the weight of every finding in its
  category, never dropping below zero.
  """

  ceiling: int = Field(100, ge=0)
  weights: Dict[Category, Dict[Severity, int]] = Field(default_factory=_default_weights)

  def penalty(self, finding: Finding) -> int:
    return self.weights.get(finding.category, {}).get(finding.severity, 0)

  def score(self, findings: Iterable[Finding], category: Category) -> int:
    """
    Scores the findings of one category.

    Args:
        findings: Findings of any category; others are ignored.
        category: The category to score.

    Returns:
        int: `max(0, ceiling - total penalty)`.
    """
    total = sum(self.penalty(f) for f in findings if f.category == category)
    return max(0, self.ceiling - total)


class CodeSize(BaseModel):
  """Character counts before and after remediation."""

  before: int
  after: int
  reduction: int = Field(..., description="before - after; negative when fixes added text.")


class OptimizationResult(BaseModel):
  """
  Output of analysing and auto-remediating one component.
  """

  original_code: str
  optimized_code: str
  accessibility_score: int
  performance_score: int
  accessibility_issues: List[Finding] = Field(default_factory=list)
  performance_issues: List[Finding] = Field(default_factory=list)
  improvements: List[str] = Field(default_factory=list, description="Descriptions of applied fixes, in order.")
  code_size: CodeSize

  @property
  def findings(self) -> List[Finding]:
    """All findings, accessibility first."""
    return [*self.accessibility_issues, *self.performance_issues]


class ComponentMetrics(BaseModel):
  """Rough size and render-cost estimates for a component."""

  dom_nodes: int
  bundle_size: float = Field(..., description="Estimated minified size in characters.")
  re_renders: int = Field(..., description="Count of state and effect hooks that can trigger renders.")
