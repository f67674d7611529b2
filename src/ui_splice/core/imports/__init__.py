"""
Import Resolution Package.

This package provides the ``ImportEngine`` class, which reads, merges and emits
module-import declarations of generated component code:

1.  **Parsing**: Reading the leading import section line by line.
2.  **Resolution**: Classifying, merging, ordering and pruning declarations.
3.  **Injection**: Synthesizing framework imports the body implicitly needs.
4.  **Rendering**: Emitting the canonical import block.

It is composed of several mixins, one per concern.
"""

from ui_splice.core.imports.base import BaseImportEngine, FRAMEWORK_PRIMITIVES
from ui_splice.core.imports.injection_mixin import InjectionMixin
from ui_splice.core.imports.models import ImportDeclaration
from ui_splice.core.imports.parsing_mixin import ParsingMixin
from ui_splice.core.imports.rendering_mixin import RenderingMixin
from ui_splice.core.imports.resolution_mixin import BUCKET_ORDER, ResolutionMixin


class ImportEngine(ParsingMixin, ResolutionMixin, InjectionMixin, RenderingMixin, BaseImportEngine):
  """
  Composite engine for import declarations.

  Inherits functionality from:
  - :class:`ParsingMixin`: reading declarations from text.
  - :class:`ResolutionMixin`: classify, merge, sort and prune.
  - :class:`InjectionMixin`: inferring implicit framework imports.
  - :class:`RenderingMixin`: emitting import lines.
  - :class:`BaseImportEngine`: framework configuration.
  """


__all__ = ["BUCKET_ORDER", "FRAMEWORK_PRIMITIVES", "ImportDeclaration", "ImportEngine"]
