"""
Base Import Engine Logic.

Holds the configuration shared by every mixin of the `ImportEngine`.
"""

from typing import Optional, Tuple

# Composition primitives a generated snippet may use without importing them.
FRAMEWORK_PRIMITIVES: Tuple[str, ...] = ("useState", "useEffect", "useMemo", "useCallback", "useRef")

STYLE_SUFFIXES: Tuple[str, ...] = (
  ".module.css",
  ".module.scss",
  ".module.sass",
  ".module.less",
  ".css",
  ".scss",
  ".sass",
  ".less",
)


class BaseImportEngine:
  """
  Configuration for import resolution.

  The engine holds no per-request state; all operations are pure functions of
  their arguments and this configuration.
  """

  def __init__(
    self,
    framework_package: str = "react",
    framework_default: str = "React",
    primitives: Tuple[str, ...] = FRAMEWORK_PRIMITIVES,
    memo_wrapper: Optional[str] = None,
  ):
    """
    Args:
        framework_package: Module id of the UI framework (e.g. 'react').
        framework_default: Default binding synthesized for the framework import.
        primitives: Framework names whose use implies a framework import.
        memo_wrapper: Pure-rendering helper, either `<default>.<attr>` or a bare
            named export of the framework. Defaults to `<framework_default>.memo`.
    """
    self.framework_package = framework_package
    self.framework_default = framework_default
    self.primitives = tuple(primitives)
    self.memo_wrapper = memo_wrapper or f"{framework_default}.memo"
