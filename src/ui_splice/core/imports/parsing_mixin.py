"""
Import Parsing Mixin.

Extracts `ImportDeclaration` records from the leading import section of a text
using line-level regular expressions.

Only the leading run of import, comment and blank lines is scanned; the first
other line ends the section. An import statement wrapped over several lines
(as a formatter prints a long binding list) is joined into one logical line
first. Each statement is then matched against four shapes in priority order:

1.  Default binding: ``import React from 'react'``
2.  Named block: ``import { useState } from 'react'``
3.  Combined: ``import React, { useState } from 'react'``
4.  Side effect: ``import './styles.css'``

Statements of any other shape (namespace imports, ``import type``) are skipped
without error. Such a skipped import is absent from the result and may
therefore disappear from a merged block.
"""

import re
from typing import Dict, List, Optional, Tuple

from ui_splice.core.imports.models import ImportDeclaration
from ui_splice.core.imports.utils import IMPORT_PREFIX, split_bindings

_MODULE = r"""['"]([^'"]+)['"]"""

DEFAULT_RE = re.compile(rf"^([\w$]+)\s+from\s+{_MODULE}")
NAMED_RE = re.compile(rf"^\{{([^}}]*)\}}\s*from\s+{_MODULE}")
COMBINED_RE = re.compile(rf"^([\w$]+)\s*,\s*\{{([^}}]*)\}}\s*from\s+{_MODULE}")
SIDE_EFFECT_RE = re.compile(rf"^{_MODULE}")

# A line that closes an import statement: `... from 'm'` or `import 'm'`.
STATEMENT_END_RE = re.compile(rf"(?:\bfrom\s*{_MODULE}|^import\s*{_MODULE})\s*;?\s*$")

COMMENT_PREFIXES = ("//", "/*", "*")

Span = Tuple[int, int]


def _is_comment(stripped: str) -> bool:
  return stripped.startswith(COMMENT_PREFIXES)


def _statement_end(lines: List[str], start: int) -> int:
  """
  Finds the end of the import statement opening at `lines[start]`.

  Continuation lines are consumed up to the one carrying the module specifier.
  A blank line, another import or the end of the text before that point means
  the statement is not wrapped, and only the opening line is taken.

  Returns:
      int: Index one past the statement's last line.
  """
  first = lines[start].strip()
  if first.endswith(";") or STATEMENT_END_RE.search(first):
    return start + 1

  for idx in range(start + 1, len(lines)):
    stripped = lines[idx].strip()
    if not stripped or stripped.startswith(IMPORT_PREFIX):
      break
    if STATEMENT_END_RE.search(stripped):
      return idx + 1
  return start + 1


def scan_header(lines: List[str]) -> Tuple[List[Span], int]:
  """
  Locates the import statements of the leading import section.

  Args:
      lines: Source text split on newlines.

  Returns:
      Tuple[List[Span], int]: Half-open line spans of each import statement,
      and the index of the first line after the section.
  """
  spans: List[Span] = []
  idx = 0
  while idx < len(lines):
    stripped = lines[idx].strip()
    if stripped.startswith(IMPORT_PREFIX):
      end = _statement_end(lines, idx)
      spans.append((idx, end))
      idx = end
      continue
    if stripped and not _is_comment(stripped):
      break
    idx += 1
  return spans, idx


class ParsingMixin:
  """
  Mixin for reading import declarations out of source text.
  """

  def parse(self, source_text: str) -> List[ImportDeclaration]:
    """
    Parses the leading import section of `source_text`.

    Declarations for a module that appears on several lines are folded into one
    (first default wins, named bindings unioned).

    Args:
        source_text: Component or file source.

    Returns:
        List[ImportDeclaration]: Declarations in first-seen order.
    """
    found: Dict[str, ImportDeclaration] = {}
    lines = source_text.split("\n")
    spans, _ = scan_header(lines)

    for start, end in spans:
      statement = " ".join(line.strip() for line in lines[start:end])
      decl = self.parse_line(statement)
      if decl is None:
        continue

      previous = found.get(decl.module_id)
      if previous is None:
        found[decl.module_id] = decl
      else:
        found[decl.module_id] = previous.with_bindings(
          previous.default_binding or decl.default_binding,
          previous.named_bindings | decl.named_bindings,
        )

    return list(found.values())

  def parse_line(self, line: str) -> Optional[ImportDeclaration]:
    """
    Parses one import statement.

    Args:
        line: A stripped statement starting with 'import ', already joined
            onto one line.

    Returns:
        Optional[ImportDeclaration]: The declaration, or None for an
        unrecognized shape.
    """
    clean = re.sub(r"^import\s+", "", line)
    clean = re.sub(r";?\s*$", "", clean)

    match = DEFAULT_RE.match(clean)
    if match:
      return ImportDeclaration.create(match.group(2), default=match.group(1))

    match = NAMED_RE.match(clean)
    if match:
      return ImportDeclaration.create(match.group(2), named=split_bindings(match.group(1)))

    match = COMBINED_RE.match(clean)
    if match:
      return ImportDeclaration.create(
        match.group(3),
        default=match.group(1),
        named=split_bindings(match.group(2)),
      )

    match = SIDE_EFFECT_RE.match(clean)
    if match:
      return ImportDeclaration.create(match.group(1), raw=line)

    return None

  def split_body(self, source_text: str) -> str:
    """
    Removes the import statements of the leading import section.

    Every line of a wrapped statement goes with it. Comments inside the
    section are kept; leading blank lines of the remainder are dropped.

    Args:
        source_text: Component or file source.

    Returns:
        str: Everything except the leading import statements.
    """
    lines = source_text.split("\n")
    spans, header_end = scan_header(lines)

    removed = set()
    for start, end in spans:
      removed.update(range(start, end))

    kept = [line for idx, line in enumerate(lines[:header_end]) if idx not in removed]
    kept.extend(lines[header_end:])
    return "\n".join(kept).lstrip("\n")
