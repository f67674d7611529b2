"""
Analyze Command Handler.

Scores a component file for accessibility and performance without rewriting it.
Output is a Rich table by default, or Markdown reports / JSON on request.
"""

import json
from pathlib import Path
from typing import List, Optional

from rich.markup import escape
from rich.table import Table

from ui_splice.core.quality import Finding, QualityOptimizer
from ui_splice.core.quality.reports import render_accessibility_report, render_performance_report
from ui_splice.utils.console import console, format_score, log_error, log_warning

_SEVERITY_STYLES = {
  "error": "red",
  "high": "red",
  "warning": "yellow",
  "medium": "yellow",
  "info": "dim",
  "low": "green",
}


def handle_analyze(
  path: Path,
  markdown: bool = False,
  json_mode: bool = False,
  fail_under: Optional[int] = None,
  optimizer: Optional[QualityOptimizer] = None,
) -> int:
  """
  Handles the 'analyze' command execution.

  Args:
      path: Component file to analyze.
      markdown: Print the Markdown reports instead of a table.
      json_mode: Print machine-readable JSON instead of a table.
      fail_under: If set, exit 1 when either score falls below it.
      optimizer: Pre-built optimizer (used by tests).

  Returns:
      int: Exit code.
  """
  if not path.is_file():
    log_error(f"Input not found: {path}")
    return 1

  code = path.read_text(encoding="utf-8")
  optimizer = optimizer or QualityOptimizer()

  a11y_score, a11y_issues = optimizer.analyze_accessibility(code)
  perf_score, perf_issues = optimizer.analyze_performance(code)

  if json_mode:
    payload = {
      "file": str(path),
      "accessibility_score": a11y_score,
      "performance_score": perf_score,
      "findings": [f.model_dump(mode="json") for f in a11y_issues + perf_issues],
    }
    print(json.dumps(payload, indent=2))
  elif markdown:
    console.print(render_accessibility_report(optimizer, code), markup=False)
    console.print(render_performance_report(optimizer, code), markup=False)
  else:
    _print_table(path, a11y_score, perf_score, a11y_issues + perf_issues)

  if fail_under is not None and min(a11y_score, perf_score) < fail_under:
    log_warning(f"Score below threshold {fail_under}.")
    return 1
  return 0


def _print_table(path: Path, a11y_score: int, perf_score: int, findings: List[Finding]) -> None:
  table = Table(title=f"Quality: {path.name}")
  table.add_column("Rule", style="rule")
  table.add_column("Category")
  table.add_column("Severity")
  table.add_column("Snippet", overflow="fold")
  table.add_column("Fix", style="dim")
  table.add_column("Auto-fix")

  for f in findings:
    sev = f.severity.value
    color = _SEVERITY_STYLES.get(sev, "white")
    table.add_row(
      f.rule_id,
      f.category.value,
      f"[{color}]{sev}[/{color}]",
      escape(f.located_snippet),
      escape(f.suggested_fix),
      f.fix_id or "",
    )

  console.print(table)
  console.print(f"{format_score('Accessibility', a11y_score)}  {format_score('Performance', perf_score)}")
