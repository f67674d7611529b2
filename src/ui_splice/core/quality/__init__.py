"""
Quality Analyzer & Remediator Package.

- ``rules``: the closed registry of accessibility and performance rules.
- ``remediation``: the ordered, idempotent auto-fix sequence.
- ``optimizer``: ``QualityOptimizer``, scoring and ``optimize_component``.
- ``reports``: Markdown renderings of analyzer results.
"""

from ui_splice.core.quality.models import (
  CodeSize,
  ComponentMetrics,
  Finding,
  OptimizationResult,
  ScoringPolicy,
)
from ui_splice.core.quality.optimizer import QualityOptimizer
from ui_splice.core.quality.remediation import REMEDIATIONS, Remediation, auto_remediate, build_remediations
from ui_splice.core.quality.rules import RULES, RULES_BY_ID, Rule, rules_for

__all__ = [
  "CodeSize",
  "ComponentMetrics",
  "Finding",
  "OptimizationResult",
  "QualityOptimizer",
  "REMEDIATIONS",
  "RULES",
  "RULES_BY_ID",
  "Remediation",
  "Rule",
  "ScoringPolicy",
  "auto_remediate",
  "build_remediations",
  "rules_for",
]
