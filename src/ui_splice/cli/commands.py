"""
CLI Command Handlers Facade.

Re-exports the handlers from `ui_splice.cli.handlers` so the entry point and
tests share one import surface.
"""

from ui_splice.cli.handlers.analyze import handle_analyze
from ui_splice.cli.handlers.imports import handle_imports
from ui_splice.cli.handlers.integrate import handle_integrate

__all__ = [
  "handle_analyze",
  "handle_imports",
  "handle_integrate",
]
