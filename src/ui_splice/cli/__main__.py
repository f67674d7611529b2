"""
Main Entry Point for the ui-splice CLI.

This module handles argument parsing and dispatches to the command handlers
defined in `ui_splice.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ui_splice import __version__
from ui_splice.cli import commands
from ui_splice.config import parse_cli_key_values


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="ui-splice: Integrate generated UI components into a codebase")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: INTEGRATE ---
  cmd_int = subparsers.add_parser("integrate", help="Format, fix and merge a generated component")
  cmd_int.add_argument("path", type=Path, help="File holding the generated component")
  cmd_int.add_argument("--into", type=Path, default=None, help="Destination file to merge imports with")
  cmd_int.add_argument("--out", type=Path, default=None, help="Output file (default: stdout)")
  cmd_int.add_argument("--file-name", default=None, help="Dialect hint (default: destination or input name)")
  cmd_int.add_argument("--no-format", action="store_true", help="Skip the formatting engine entirely")
  cmd_int.add_argument(
    "--json-report", type=Path, default=None, help="Dump the integration report (scores, findings) to a JSON file."
  )
  cmd_int.add_argument(
    "--style",
    nargs="*",
    help="Style overrides in key=value format (e.g. tabWidth=4 singleQuote=false)",
  )

  # --- Command: ANALYZE ---
  cmd_an = subparsers.add_parser("analyze", help="Score a component for accessibility and performance")
  cmd_an.add_argument("path", type=Path, help="Component file")
  output = cmd_an.add_mutually_exclusive_group()
  output.add_argument("--markdown", action="store_true", help="Print Markdown reports")
  output.add_argument("--json", action="store_true", help="Print findings as JSON")
  cmd_an.add_argument("--fail-under", type=int, default=None, help="Exit 1 if either score is below this value")

  # --- Command: IMPORTS ---
  cmd_imp = subparsers.add_parser("imports", help="Print the canonical import block for a component")
  cmd_imp.add_argument("path", type=Path, help="Component file")
  cmd_imp.add_argument("--into", type=Path, default=None, help="Destination file to merge imports with")
  cmd_imp.add_argument("--framework", default="react", help="UI framework package (default: react)")
  cmd_imp.add_argument("--style", nargs="*", help="Style overrides in key=value format")
  cmd_imp.add_argument("--needs", action="store_true", help="Also list the hooks and libraries the component calls")

  args = parser.parse_args(argv)

  if args.command == "integrate":
    overrides = parse_cli_key_values(args.style)
    return commands.handle_integrate(
      args.path, args.into, args.out, args.file_name, overrides, args.json_report, args.no_format
    )

  elif args.command == "analyze":
    return commands.handle_analyze(args.path, args.markdown, args.json, args.fail_under)

  elif args.command == "imports":
    overrides = parse_cli_key_values(args.style)
    return commands.handle_imports(args.path, args.into, args.framework, overrides, args.needs)

  return 1


if __name__ == "__main__":
  sys.exit(main())
