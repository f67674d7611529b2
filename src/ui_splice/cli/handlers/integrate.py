"""
Integrate Command Handler.

Implements `ui-splice integrate`:
1. Reads the generated component and, optionally, the destination file.
2. Resolves the style (destination inference, pyproject settings, CLI overrides).
3. Runs the integration pipeline.
4. Writes the final text and an optional JSON report.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ui_splice.config import TomlSettingsStore
from ui_splice.core.formatter import StyleNormalizer
from ui_splice.core.pipeline import IntegrationPipeline, IntegrationRequest, IntegrationResult
from ui_splice.utils.console import console, format_score, log_error, log_info, log_success, log_warning


def handle_integrate(
  input_path: Path,
  destination: Optional[Path],
  output_path: Optional[Path],
  file_name: Optional[str],
  style_overrides: Dict[str, Any],
  json_report: Optional[Path] = None,
  skip_format: bool = False,
  pipeline: Optional[IntegrationPipeline] = None,
) -> int:
  """
  Handles the 'integrate' command execution.

  Args:
      input_path: File holding the generated component text.
      destination: Existing file the component is destined for, if any.
      output_path: Where to write the final text. Prints to stdout if None.
      file_name: Dialect hint; defaults to the destination or input file name.
      style_overrides: Style options from `--style key=value`.
      json_report: Optional path to dump the structured report as JSON.
      skip_format: If True, no formatting engine is acquired.
      pipeline: Pre-built pipeline (used by tests).

  Returns:
      int: Exit code (0 for success, 1 for unreadable input).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  destination_text = None
  if destination is not None:
    if destination.is_file():
      destination_text = destination.read_text(encoding="utf-8")
    else:
      log_warning(f"Destination {destination} does not exist yet; integrating without merge context.")

  if pipeline is None:
    normalizer = StyleNormalizer(sources=[]) if skip_format else StyleNormalizer()
    pipeline = IntegrationPipeline(normalizer=normalizer, settings=TomlSettingsStore(input_path.parent))

  hint = file_name or (destination.name if destination is not None else input_path.name)
  request = IntegrationRequest(
    source_text=input_path.read_text(encoding="utf-8"),
    file_name_hint=hint,
    destination_text=destination_text,
    style_overrides=style_overrides,
  )

  log_info(f"Integrating [path]{input_path}[/path] as {hint}")
  result = pipeline.integrate_sync(request)
  _log_summary(result, skip_format)

  if json_report is not None:
    json_report.write_text(result.report.model_dump_json(indent=2), encoding="utf-8")
    log_info(f"Report written to [path]{json_report}[/path]")

  if output_path is not None:
    output_path.write_text(result.final_text, encoding="utf-8")
    log_success(f"Wrote {output_path}")
  else:
    print(result.final_text)

  return 0


def _log_summary(result: IntegrationResult, skip_format: bool) -> None:
  report = result.report
  if report.format_error and not skip_format:
    log_warning(f"Formatting skipped: {report.format_error}")
    for hint in report.format_suggestions:
      console.print(f"  • {hint}", style="dim")

  for fix in report.applied_fixes:
    log_info(fix)

  console.print(
    f"{format_score('Accessibility', report.accessibility_score)}  "
    f"{format_score('Performance', report.performance_score)}  "
    f"Findings: {len(report.findings)}"
  )
