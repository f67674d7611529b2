from .analyze import handle_analyze
from .imports import handle_imports
from .integrate import handle_integrate

__all__ = [
  "handle_analyze",
  "handle_imports",
  "handle_integrate",
]
