"""
Import Declaration Model.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Optional

from ui_splice.core.imports.utils import local_name


@dataclass(frozen=True)
class ImportDeclaration:
  """
  A single module import.

  Represents `import D from 'm'`, `import { a, b } from 'm'`,
  `import D, { a } from 'm'` or the side-effect form `import 'm'`.

  Attributes:
      module_id: The module specifier; unique within a resolved collection.
      default_binding: Name bound to the module's default export, if any.
      named_bindings: Named imports, possibly aliased (`a as b`).
      raw_literal: Verbatim line of a side-effect-only import.
  """

  module_id: str
  default_binding: Optional[str] = None
  named_bindings: FrozenSet[str] = field(default_factory=frozenset)
  raw_literal: Optional[str] = None

  @classmethod
  def create(
    cls,
    module_id: str,
    default: Optional[str] = None,
    named: Iterable[str] = (),
    raw: Optional[str] = None,
  ) -> "ImportDeclaration":
    """Convenience constructor accepting any iterable of named bindings."""
    return cls(module_id=module_id, default_binding=default, named_bindings=frozenset(named), raw_literal=raw)

  @property
  def is_side_effect(self) -> bool:
    """True when the declaration binds no names."""
    return self.default_binding is None and not self.named_bindings

  @property
  def sorted_named(self) -> list:
    """Named bindings in lexical order, as they are emitted."""
    return sorted(self.named_bindings)

  @property
  def bound_names(self) -> FrozenSet[str]:
    """Every local identifier this declaration introduces."""
    names = {local_name(binding) for binding in self.named_bindings}
    if self.default_binding:
      names.add(self.default_binding)
    return frozenset(names)

  def with_bindings(self, default: Optional[str], named: Iterable[str]) -> "ImportDeclaration":
    """
    Returns a copy carrying the given bindings.

    The raw literal only describes a binding-free import, so it is dropped as
    soon as the copy binds anything.
    """
    named_set = frozenset(named)
    raw = self.raw_literal if default is None and not named_set else None
    return replace(self, default_binding=default, named_bindings=named_set, raw_literal=raw)
