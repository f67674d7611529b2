"""
Import Resolution Mixin.

Classification, merging, canonical ordering and pruning of declarations.
"""

from typing import Dict, Iterable, List

from ui_splice.core.imports.base import STYLE_SUFFIXES
from ui_splice.core.imports.models import ImportDeclaration
from ui_splice.core.imports.utils import is_identifier_used, local_name, strip_import_lines
from ui_splice.enums import OriginClass

BUCKET_ORDER = (OriginClass.FRAMEWORK, OriginClass.THIRD_PARTY, OriginClass.LOCAL, OriginClass.STYLE)


class ResolutionMixin:
  """
  Mixin for merging and ordering declaration collections.
  """

  framework_package: str

  def classify(self, module_id: str) -> OriginClass:
    """
    Derives the origin class of a module specifier.

    The checks run in a fixed order: style suffix, framework package, local
    path, then third party.

    Args:
        module_id: Module specifier (e.g. 'react-dom', './Card', 'theme.css').

    Returns:
        OriginClass: The bucket for canonical ordering.
    """
    if module_id.endswith(STYLE_SUFFIXES):
      return OriginClass.STYLE

    pkg = self.framework_package
    if (
      module_id == pkg
      or module_id.startswith(f"{pkg}-")
      or module_id.startswith(f"{pkg}/")
      or module_id.startswith(f"@{pkg}")
    ):
      return OriginClass.FRAMEWORK

    if module_id.startswith((".", "/")):
      return OriginClass.LOCAL

    return OriginClass.THIRD_PARTY

  def merge(
    self,
    existing: Iterable[ImportDeclaration],
    incoming: Iterable[ImportDeclaration],
  ) -> List[ImportDeclaration]:
    """
    Keyed union of two collections on `module_id`, in canonical order.

    For a module on both sides, the default binding of `existing` wins when
    both define one and the named bindings are unioned. Modules present only
    in `incoming` are added unchanged.

    Args:
        existing: Declarations already in the destination file.
        incoming: Declarations from the generated text.

    Returns:
        List[ImportDeclaration]: One declaration per module, sorted and grouped.
    """
    merged: Dict[str, ImportDeclaration] = {}

    for decl in [*existing, *incoming]:
      current = merged.get(decl.module_id)
      if current is None:
        merged[decl.module_id] = decl
        continue

      merged[decl.module_id] = current.with_bindings(
        current.default_binding or decl.default_binding,
        current.named_bindings | decl.named_bindings,
      )

    return self.sort_and_group(merged.values())

  def sort_and_group(self, declarations: Iterable[ImportDeclaration]) -> List[ImportDeclaration]:
    """
    Orders declarations into the canonical import block.

    Buckets follow [framework, thirdParty, local, style]; within a bucket,
    declarations are ordered by lexical comparison of `module_id`.

    Args:
        declarations: Any collection of declarations.

    Returns:
        List[ImportDeclaration]: The concatenated, ordered buckets.
    """
    buckets: Dict[OriginClass, List[ImportDeclaration]] = {origin: [] for origin in BUCKET_ORDER}
    for decl in declarations:
      buckets[self.classify(decl.module_id)].append(decl)

    ordered: List[ImportDeclaration] = []
    for origin in BUCKET_ORDER:
      ordered.extend(sorted(buckets[origin], key=lambda d: d.module_id))
    return ordered

  def prune_unused(self, declarations: Iterable[ImportDeclaration], body_text: str) -> List[ImportDeclaration]:
    """
    Drops bindings that the body never references.

    Import lines are removed from `body_text` before searching. Side-effect
    imports are always kept. A declaration left without any binding is dropped;
    otherwise only its used bindings survive.

    Args:
        declarations: Candidate declarations.
        body_text: Code the bindings must appear in.

    Returns:
        List[ImportDeclaration]: Surviving declarations in input order.
    """
    code = strip_import_lines(body_text)
    kept: List[ImportDeclaration] = []

    for decl in declarations:
      if decl.is_side_effect:
        kept.append(decl)
        continue

      default = decl.default_binding
      if default is not None and not is_identifier_used(default, code):
        default = None
      named = [n for n in decl.named_bindings if is_identifier_used(local_name(n), code)]

      if default is None and not named:
        continue
      kept.append(decl.with_bindings(default, named))

    return kept
