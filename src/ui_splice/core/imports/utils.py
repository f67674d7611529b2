"""
Utilities for the Import Engine.

Static helpers for splitting binding lists, resolving local names and testing
identifier usage in body text.
"""

import re
from typing import List

IMPORT_PREFIX = "import "

_AS_SPLIT = re.compile(r"\s+as\s+")


def split_bindings(block: str) -> List[str]:
  """
  Splits the inside of a `{ ... }` binding block.

  Whitespace is normalized and empty entries (trailing commas) are dropped.

  Args:
      block: Text between the braces, e.g. ' useState, useEffect, '.

  Returns:
      List[str]: Bindings in source order, e.g. ['useState', 'useEffect'].
  """
  bindings = []
  for part in block.split(","):
    cleaned = " ".join(part.split())
    if cleaned:
      bindings.append(cleaned)
  return bindings


def local_name(binding: str) -> str:
  """
  Resolves the identifier a named binding introduces.

  Args:
      binding: A binding such as 'useState' or 'default as Card'.

  Returns:
      str: 'useState' or 'Card' respectively.
  """
  return _AS_SPLIT.split(binding.strip())[-1]


def strip_import_lines(code: str) -> str:
  """
  Removes every line whose stripped form starts with 'import '.

  Args:
      code: Source text.

  Returns:
      str: The text without import lines.
  """
  return "\n".join(line for line in code.split("\n") if not line.strip().startswith(IMPORT_PREFIX))


def is_identifier_used(identifier: str, code: str) -> bool:
  """
  Checks for a whole-word occurrence of `identifier` in `code`.

  Args:
      identifier: Name to search for.
      code: Text to search, usually with import lines already stripped.

  Returns:
      bool: True if the identifier occurs as a whole word.
  """
  if not identifier:
    return False
  # '$' is a legal identifier character in script dialects, so plain \b is not enough.
  pattern = rf"(?<![\w$]){re.escape(identifier)}(?![\w$])"
  return re.search(pattern, code) is not None
