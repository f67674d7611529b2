"""
Lexical Markup Helpers.

Regular expressions for locating element tags in JSX-like text, plus helpers to
query and insert attributes. A tag body may contain quoted attribute values or
`{...}` expressions holding `>` characters; one level of braces is understood.
"""

import re
from typing import Optional

# Tag body: quoted strings, single-level {expressions} or other characters.
_TAG_BODY = r"""(?:"[^"]*"|'[^']*'|\{[^}]*\}|[^>{"'])*"""

IMAGE_TAG_RE = re.compile(rf"<(?:img|Image)\b{_TAG_BODY}>")
BUTTON_OPEN_RE = re.compile(rf"<button\b{_TAG_BODY}>")
BUTTON_ELEMENT_RE = re.compile(rf"<button\b({_TAG_BODY})>(.*?)</button>", re.DOTALL)
FORM_CONTROL_RE = re.compile(rf"<(?:input|textarea|select)\b{_TAG_BODY}>")
ANY_OPEN_TAG_RE = re.compile(r"<[^/!][^>]*>")
INNER_TAG_RE = re.compile(r"<[^>]*>")

DIV_RE = re.compile(r"<div\b")
LANDMARK_TAGS = ("nav", "main", "header", "footer", "section", "article", "aside")
LANDMARK_RE = re.compile(rf"<(?:{'|'.join(LANDMARK_TAGS)})\b")

COMPONENT_WITH_INPUTS_RE = re.compile(
  r"(?:const|let|var)\s+([A-Z][\w$]*)\s*(?::\s*[^=]+?)?=\s*(?:\(\s*(?:props\b|\{)|props\s*=>)"
  r"|function\s+([A-Z][\w$]*)\s*\(\s*(?:props\b|\{)"
)
MEMO_WRAPPED_RE = re.compile(r"(?<![\w$])(?:[\w$]+\.)?memo\(")


def has_attribute(tag: str, name: str) -> bool:
  """
  Checks whether an opening tag carries an attribute.

  Args:
      tag: Full tag text, e.g. '<img src="a.png" />'.
      name: Attribute name, e.g. 'alt'.

  Returns:
      bool: True if `name=` appears as an attribute in the tag.
  """
  return re.search(rf"(?<![\w-]){re.escape(name)}\s*=", tag) is not None


def insert_attribute(tag: str, attribute: str) -> str:
  """
  Appends an attribute just before the tag's closing `>` or `/>`.

  Args:
      tag: Full opening tag text.
      attribute: Attribute source, e.g. 'alt=""'.

  Returns:
      str: The rewritten tag.
  """
  if tag.endswith("/>"):
    return f"{tag[:-2].rstrip()} {attribute} />"
  return f"{tag[:-1].rstrip()} {attribute}>"


def find_component_with_inputs(code: str) -> Optional[str]:
  """
  Finds the first component (capitalized binding) that takes props.

  Args:
      code: Component source.

  Returns:
      Optional[str]: The component name, or None.
  """
  match = COMPONENT_WITH_INPUTS_RE.search(code)
  if not match:
    return None
  return match.group(1) or match.group(2)


def is_memo_wrapped(code: str, wrapper: Optional[str] = None) -> bool:
  """True if the code already uses a memo wrapper (or `wrapper`) anywhere."""
  if wrapper and f"{wrapper}(" in code:
    return True
  return MEMO_WRAPPED_RE.search(code) is not None


def visible_text(inner_markup: str) -> str:
  """
  Strips nested tags from element content.

  Args:
      inner_markup: Markup between an element's opening and closing tags.

  Returns:
      str: Remaining text with surrounding whitespace removed.
  """
  return INNER_TAG_RE.sub("", inner_markup).strip()
