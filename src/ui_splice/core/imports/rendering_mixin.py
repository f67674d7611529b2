"""
Import Rendering Mixin.

Emits declarations as source lines.
"""

from typing import Iterable, Optional

from ui_splice.config import StyleConfig
from ui_splice.core.imports.models import ImportDeclaration


class RenderingMixin:
  """
  Mixin for turning declarations back into text.
  """

  def render_declaration(self, decl: ImportDeclaration, style: Optional[StyleConfig] = None) -> str:
    """
    Renders one declaration.

    A side-effect import that still carries its raw literal is emitted verbatim.

    Args:
        decl: The declaration.
        style: Quote, semicolon and bracket spacing options.

    Returns:
        str: A single import line.
    """
    style = style or StyleConfig()
    q = style.quote
    end = ";" if style.semi else ""

    if decl.is_side_effect:
      if decl.raw_literal:
        return decl.raw_literal
      return f"import {q}{decl.module_id}{q}{end}"

    parts = []
    if decl.default_binding:
      parts.append(decl.default_binding)
    if decl.named_bindings:
      inner = ", ".join(decl.sorted_named)
      parts.append(f"{{ {inner} }}" if style.bracket_spacing else f"{{{inner}}}")

    return f"import {', '.join(parts)} from {q}{decl.module_id}{q}{end}"

  def render(self, declarations: Iterable[ImportDeclaration], style: Optional[StyleConfig] = None) -> str:
    """
    Renders an import block, one declaration per line, in the given order.

    Args:
        declarations: Declarations, usually already sorted and grouped.
        style: Rendering options.

    Returns:
        str: Newline-joined import lines (empty string for no declarations).
    """
    return "\n".join(self.render_declaration(decl, style) for decl in declarations)
