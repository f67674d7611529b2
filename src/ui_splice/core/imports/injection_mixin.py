"""
Import Injection Mixin.

Synthesizes the framework import that generated snippets often assume is
already in scope.
"""

import re
from typing import List, Optional, Tuple

from ui_splice.core.imports.models import ImportDeclaration
from ui_splice.core.imports.utils import is_identifier_used

MARKUP_MARKERS: Tuple[str, ...] = ("</", "/>", "JSX")

# (call marker, reported name) for analyze_import_needs.
_FRAMEWORK_CALLS: Tuple[Tuple[str, str], ...] = (
  ("useState(", "useState"),
  ("useEffect(", "useEffect"),
  ("useCallback(", "useCallback"),
  ("useMemo(", "useMemo"),
  ("useRef(", "useRef"),
  ("useContext(", "useContext"),
  ("useReducer(", "useReducer"),
)

_LIBRARY_MARKERS: Tuple[Tuple[str, str], ...] = (
  (r"\b(?:clsx|cn)\(", "clsx"),
  (r"\baxios\.", "axios"),
  (r"\bmoment\(", "moment"),
  (r"(?:\blodash\.|(?<![\w$])_\.)", "lodash"),
)


class InjectionMixin:
  """
  Mixin for inferring imports a body needs but does not declare.
  """

  framework_package: str
  framework_default: str
  primitives: Tuple[str, ...]
  memo_wrapper: str

  def infer_framework_needs(self, body_text: str) -> Optional[ImportDeclaration]:
    """
    Synthesizes a framework declaration from usage in `body_text`.

    Referenced composition primitives, and a bare-name memo helper, become
    named bindings next to the framework default binding. Without them, markup
    syntax or a `<default>.` reference alone still requires the default
    binding.

    Args:
        body_text: Component code, imports excluded or not.

    Returns:
        Optional[ImportDeclaration]: The framework declaration, or None when
        the body needs nothing from the framework.
    """
    used = [name for name in self.primitives if is_identifier_used(name, body_text)]

    helper = self.memo_wrapper.split(".")[0]
    if helper != self.framework_default and helper not in used and is_identifier_used(helper, body_text):
      used.append(helper)

    if used:
      return ImportDeclaration.create(self.framework_package, default=self.framework_default, named=used)

    if is_identifier_used(self.framework_default, body_text) or any(marker in body_text for marker in MARKUP_MARKERS):
      return ImportDeclaration.create(self.framework_package, default=self.framework_default)

    return None

  def analyze_import_needs(self, code: str) -> List[str]:
    """
    Lists framework hooks and common libraries that `code` appears to call.

    Args:
        code: Source text.

    Returns:
        List[str]: Names in a fixed order, e.g. ['useState', 'clsx'].
    """
    needs = [name for marker, name in _FRAMEWORK_CALLS if marker in code]
    needs.extend(name for pattern, name in _LIBRARY_MARKERS if re.search(pattern, code))
    return needs
