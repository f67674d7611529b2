"""
Markdown reports for analyzer results.
"""

from typing import List

from ui_splice.core.quality.optimizer import QualityOptimizer
from ui_splice.enums import Severity

_SEVERITY_MARKERS = {Severity.HIGH: "🔴", Severity.MEDIUM: "🟡", Severity.LOW: "🟢"}


def render_accessibility_report(optimizer: QualityOptimizer, code: str) -> str:
  """
  Builds a Markdown accessibility report.

  Args:
      optimizer: The analyzer to run.
      code: Component source.

  Returns:
      str: Markdown text with the score and issues grouped by severity.
  """
  score, issues = optimizer.analyze_accessibility(code)
  lines: List[str] = ["# Accessibility Report", "", f"## Score: {score}/100", ""]

  if not issues:
    lines.append("✅ No accessibility issues found!")
    return "\n".join(lines) + "\n"

  lines.extend(["## Issues Found:", ""])
  for severity, title in ((Severity.ERROR, "Errors"), (Severity.WARNING, "Warnings"), (Severity.INFO, "Notes")):
    group = [i for i in issues if i.severity == severity]
    if not group:
      continue
    lines.append(f"### {title} ({len(group)})")
    for issue in group:
      lines.append(f"- **{issue.rule_id}**: {issue.description}")
      if issue.conformance_level is not None:
        lines.append(f"  - WCAG Level: {issue.conformance_level.value}")
      lines.append(f"  - Element: `{issue.located_snippet}`")
      lines.append(f"  - Fix: {issue.suggested_fix}")
      lines.append("")

  return "\n".join(lines).rstrip("\n") + "\n"


def render_performance_report(optimizer: QualityOptimizer, code: str) -> str:
  """
  Builds a Markdown performance report including size metrics.

  Args:
      optimizer: The analyzer to run.
      code: Component source.

  Returns:
      str: Markdown text with score, metrics and issues.
  """
  score, issues = optimizer.analyze_performance(code)
  metrics = optimizer.measure_metrics(code)

  lines: List[str] = [
    "# Performance Report",
    "",
    f"## Score: {score}/100",
    "",
    "## Metrics:",
    f"- DOM Nodes: {metrics.dom_nodes}",
    f"- Estimated Bundle Size: {round(metrics.bundle_size)} bytes",
    f"- Potential Re-renders: {metrics.re_renders}",
    "",
  ]

  if not issues:
    lines.append("✅ No performance issues found!")
    return "\n".join(lines) + "\n"

  lines.extend(["## Issues Found:", ""])
  for issue in issues:
    marker = _SEVERITY_MARKERS.get(issue.severity, "•")
    lines.append(f"{marker} **{issue.description}** ({issue.rule_id})")
    if issue.impact:
      lines.append(f"- Impact: {issue.impact}")
    lines.append(f"- Suggestion: {issue.suggested_fix}")
    lines.append("")

  return "\n".join(lines).rstrip("\n") + "\n"
