"""
Auto-remediation.

A fixed, ordered sequence of textual rewrites. Every rewrite checks for the
attribute or wrapper it would add before adding it, so applying the sequence
to its own output changes nothing.

Order:
1.  ``image-alt``: `alt=""` on image tags without `alt`.
2.  ``button-type``: `type="button"` on button tags without `type`.
3.  ``memo-wrap``: `export default Name` becomes `export default React.memo(Name)`,
    or the configured pure-rendering helper in place of `React.memo`.
4.  ``image-lazy``: `loading="lazy"` on image tags without `loading`.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ui_splice.core.quality import markup

Rewrite = Callable[[str], str]

DEFAULT_MEMO_WRAPPER = "React.memo"


@dataclass(frozen=True)
class Remediation:
  """
  An automatic fix.

  Attributes:
      fix_id: Stable identifier, referenced by `Rule.fix_id`.
      improvement: Description recorded when the rewrite changes the text.
      apply: The guarded rewrite.
  """

  fix_id: str
  improvement: str
  apply: Rewrite


def _add_missing_attribute(tag_re: re.Pattern, name: str, attribute: str) -> Rewrite:
  def rewrite(code: str) -> str:
    def fix(m: re.Match) -> str:
      tag = m.group(0)
      if markup.has_attribute(tag, name):
        return tag
      return markup.insert_attribute(tag, attribute)

    return tag_re.sub(fix, code)

  return rewrite


def add_button_type(code: str) -> str:
  def fix(m: re.Match) -> str:
    tag = m.group(0)
    if markup.has_attribute(tag, "type"):
      return tag
    return '<button type="button"' + tag[len("<button") :]

  return markup.BUTTON_OPEN_RE.sub(fix, code)


def wrap_default_export_in_memo(code: str, wrapper: str = DEFAULT_MEMO_WRAPPER) -> str:
  if markup.is_memo_wrapped(code, wrapper):
    return code
  name = markup.find_component_with_inputs(code)
  if name is None:
    return code

  pattern = re.compile(rf"^([ \t]*)export\s+default\s+{re.escape(name)}[ \t]*(;?)[ \t]*$", re.MULTILINE)
  return pattern.sub(lambda m: f"{m.group(1)}export default {wrapper}({name}){m.group(2)}", code, count=1)


def build_remediations(memo_wrapper: str = DEFAULT_MEMO_WRAPPER) -> Tuple[Remediation, ...]:
  """
  Builds the remediation sequence.

  Args:
      memo_wrapper: Pure-rendering helper the default export is wrapped in,
          e.g. 'React.memo' or a bare 'memo'.

  Returns:
      Tuple[Remediation, ...]: The ordered fixes.
  """
  return (
    Remediation(
      fix_id="image-alt",
      improvement="Added alt attributes to images",
      apply=_add_missing_attribute(markup.IMAGE_TAG_RE, "alt", 'alt=""'),
    ),
    Remediation(
      fix_id="button-type",
      improvement="Added type attribute to buttons",
      apply=add_button_type,
    ),
    Remediation(
      fix_id="memo-wrap",
      improvement=f"Added {memo_wrapper} for performance optimization",
      apply=lambda code: wrap_default_export_in_memo(code, memo_wrapper),
    ),
    Remediation(
      fix_id="image-lazy",
      improvement="Added lazy loading to images",
      apply=_add_missing_attribute(markup.IMAGE_TAG_RE, "loading", 'loading="lazy"'),
    ),
  )


REMEDIATIONS: Tuple[Remediation, ...] = build_remediations()


def auto_remediate(code: str, remediations: Optional[Tuple[Remediation, ...]] = None) -> Tuple[str, List[str]]:
  """
  Applies the remediation sequence.

  Args:
      code: Component source.
      remediations: Override of the sequence, mainly for tests.

  Returns:
      Tuple[str, List[str]]: The rewritten text and the improvements that
      actually changed it, in application order.
  """
  improvements: List[str] = []
  current = code
  for remediation in remediations if remediations is not None else REMEDIATIONS:
    updated = remediation.apply(current)
    if updated != current:
      improvements.append(remediation.improvement)
      current = updated
  return current, improvements
