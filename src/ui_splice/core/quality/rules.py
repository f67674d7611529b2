"""
Quality Rule Registry.

The analyzer runs a closed, ordered set of `Rule` records. Each rule pairs fixed
metadata (id, category, severity, wording) with a detector: a function from
component text to the list of located snippets it objects to. Detectors are
lexical heuristics; a false positive is a noisy finding, never an error.

Accessibility rules:
- ``img-alt``: image tags without an `alt` attribute.
- ``aria-labels``: buttons whose only content is an icon or nothing, without an accessible label.
- ``semantic-html``: more than ten `<div>` elements with fewer than two landmark elements.
- ``color-contrast``: a known low-contrast text/background class pair.
- ``keyboard-nav``: click handlers without any keyboard handler.
- ``form-labels``: form controls with neither a label association nor `aria-label`.

Performance rules:
- ``unnecessary-renders``: inline closures bound to `onClick`.
- ``list-virtualization``: mapping over an apparently large collection without virtualization.
- ``memo-optimization``: a props-reading component not wrapped in a memo helper.
- ``heavy-computations``: filter/reduce work not wrapped in `useMemo`.
- ``bundle-size``: whole-library imports of known heavy packages.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ui_splice.core.quality import markup
from ui_splice.core.quality.models import Finding
from ui_splice.enums import Category, ConformanceLevel, ImpactKind, Severity

Detector = Callable[[str], List[str]]

LOW_CONTRAST_PAIRS: Tuple[Tuple[str, str], ...] = (("text-gray-300", "bg-gray-100"),)

KEYBOARD_HANDLERS: Tuple[str, ...] = ("onKeyDown", "onKeyPress", "onKeyUp")

VIRTUALIZATION_HINTS: Tuple[str, ...] = (
  "react-window",
  "react-virtualized",
  "react-virtuoso",
  "@tanstack/react-virtual",
  "FixedSizeList",
  "VariableSizeList",
  "useVirtualizer",
)

LARGE_COLLECTION_THRESHOLD = 100

HEAVY_LIBRARIES: Tuple[str, ...] = ("moment", "lodash")

_INLINE_CLICK_RE = re.compile(r"onClick=\{\s*(?:\([^)]*\)\s*=>|[\w$]+\s*=>|function\b)")
_NUMBER_RE = re.compile(r"(?<![\w.$-])(\d{3,})(?![\w.])")
_COMPUTATION_RE = re.compile(r"\b(?:filter|reduce)\(")
_HEAVY_IMPORT_RE = re.compile(
  rf"""^[ \t]*import\s+(?:[\w$]+|\*\s*as\s+[\w$]+)\s+from\s+['"]({'|'.join(HEAVY_LIBRARIES)})['"].*$"""
  r"""|^[ \t]*import\s+_\s+from\s+['"][^'"]+['"].*$""",
  re.MULTILINE,
)


@dataclass(frozen=True)
class Rule:
  """
  A registered analyzer rule.

  Attributes:
      rule_id: Stable identifier reported in findings.
      category: Scoring category.
      severity: Severity of every finding this rule emits.
      detector: Returns the located snippets of each violation.
      description: What the violation is.
      suggested_fix: How to resolve it.
      conformance_level: WCAG level (accessibility rules).
      impact_kind: Affected runtime area (performance rules).
      impact: Consequence of leaving it unfixed (performance rules).
      fix_id: Id of the auto-remediation that resolves it, if any. Copied onto
          every finding so reports can tell which issues fix themselves.
  """

  rule_id: str
  category: Category
  severity: Severity
  detector: Detector
  description: str
  suggested_fix: str
  conformance_level: Optional[ConformanceLevel] = None
  impact_kind: Optional[ImpactKind] = None
  impact: Optional[str] = None
  fix_id: Optional[str] = None

  def finding(self, snippet: str) -> Finding:
    return Finding(
      category=self.category,
      severity=self.severity,
      rule_id=self.rule_id,
      description=self.description,
      located_snippet=snippet,
      suggested_fix=self.suggested_fix,
      conformance_level=self.conformance_level,
      impact_kind=self.impact_kind,
      impact=self.impact,
      fix_id=self.fix_id,
    )

  def check(self, code: str) -> List[Finding]:
    """Runs the detector and wraps each snippet in a Finding."""
    return [self.finding(snippet) for snippet in self.detector(code)]


# --- Accessibility detectors ---


def detect_missing_alt(code: str) -> List[str]:
  return [m.group(0) for m in markup.IMAGE_TAG_RE.finditer(code) if not markup.has_attribute(m.group(0), "alt")]


def detect_unlabelled_buttons(code: str) -> List[str]:
  hits = []
  for m in markup.BUTTON_ELEMENT_RE.finditer(code):
    attrs, inner = m.group(1), m.group(2)
    if markup.visible_text(inner):
      continue
    if any(markup.has_attribute(attrs, name) for name in ("aria-label", "aria-labelledby", "title")):
      continue
    hits.append(m.group(0))
  return hits


def detect_div_soup(code: str) -> List[str]:
  divs = len(markup.DIV_RE.findall(code))
  landmarks = len(markup.LANDMARK_RE.findall(code))
  if divs > 10 and landmarks < 2:
    return [f"{divs} <div> elements, {landmarks} landmark elements"]
  return []


def detect_low_contrast(code: str) -> List[str]:
  hits = []
  for text_cls, bg_cls in LOW_CONTRAST_PAIRS:
    if _has_class(code, text_cls) and _has_class(code, bg_cls):
      hits.append(f"{text_cls} on {bg_cls}")
  return hits


def detect_pointer_only(code: str) -> List[str]:
  if "onClick" in code and not any(handler in code for handler in KEYBOARD_HANDLERS):
    return ["onClick handlers"]
  return []


def detect_unlabelled_inputs(code: str) -> List[str]:
  has_label = "<label" in code and "htmlFor" in code
  hits = []
  for m in markup.FORM_CONTROL_RE.finditer(code):
    tag = m.group(0)
    if has_label or markup.has_attribute(tag, "aria-label") or markup.has_attribute(tag, "aria-labelledby"):
      continue
    if re.search(r"""type\s*=\s*['"]hidden['"]""", tag):
      continue
    hits.append(tag)
  return hits


# --- Performance detectors ---


def detect_inline_handlers(code: str) -> List[str]:
  m = _INLINE_CLICK_RE.search(code)
  return [m.group(0)] if m else []


def detect_large_lists(code: str) -> List[str]:
  if ".map(" not in code or any(hint in code for hint in VIRTUALIZATION_HINTS):
    return []
  for m in _NUMBER_RE.finditer(code):
    if int(m.group(1)) >= LARGE_COLLECTION_THRESHOLD:
      return [f".map() over a collection sized around {m.group(1)}"]
  return []


def detect_missing_memo(code: str) -> List[str]:
  name = markup.find_component_with_inputs(code)
  if name and not markup.is_memo_wrapped(code):
    return [name]
  return []


def detect_unmemoized_computation(code: str) -> List[str]:
  m = _COMPUTATION_RE.search(code)
  if m and "useMemo" not in code:
    return [m.group(0)]
  return []


def detect_heavy_imports(code: str) -> List[str]:
  return [m.group(0).strip() for m in _HEAVY_IMPORT_RE.finditer(code)]


def _has_class(code: str, class_name: str) -> bool:
  return re.search(rf"(?<![\w-]){re.escape(class_name)}(?![\w-])", code) is not None


RULES: Tuple[Rule, ...] = (
  Rule(
    rule_id="img-alt",
    category=Category.ACCESSIBILITY,
    severity=Severity.ERROR,
    detector=detect_missing_alt,
    description="Images must have alt text",
    suggested_fix='Add alt="" for decorative images or descriptive alt text',
    conformance_level=ConformanceLevel.A,
    fix_id="image-alt",
  ),
  Rule(
    rule_id="aria-labels",
    category=Category.ACCESSIBILITY,
    severity=Severity.ERROR,
    detector=detect_unlabelled_buttons,
    description="Buttons without text must have aria-label",
    suggested_fix="Add an aria-label attribute with descriptive text",
    conformance_level=ConformanceLevel.A,
  ),
  Rule(
    rule_id="semantic-html",
    category=Category.ACCESSIBILITY,
    severity=Severity.WARNING,
    detector=detect_div_soup,
    description="Consider using semantic HTML elements",
    suggested_fix="Replace generic divs with semantic elements like <nav>, <main> or <section>",
    conformance_level=ConformanceLevel.AA,
  ),
  Rule(
    rule_id="color-contrast",
    category=Category.ACCESSIBILITY,
    severity=Severity.ERROR,
    detector=detect_low_contrast,
    description="Insufficient color contrast",
    suggested_fix="Use a darker text color or a lighter background",
    conformance_level=ConformanceLevel.AA,
  ),
  Rule(
    rule_id="keyboard-nav",
    category=Category.ACCESSIBILITY,
    severity=Severity.WARNING,
    detector=detect_pointer_only,
    description="Interactive elements should support keyboard navigation",
    suggested_fix="Add onKeyDown or onKeyPress handlers for keyboard support",
    conformance_level=ConformanceLevel.A,
  ),
  Rule(
    rule_id="form-labels",
    category=Category.ACCESSIBILITY,
    severity=Severity.ERROR,
    detector=detect_unlabelled_inputs,
    description="Form inputs must have associated labels",
    suggested_fix="Add a <label> with htmlFor or an aria-label attribute",
    conformance_level=ConformanceLevel.A,
  ),
  Rule(
    rule_id="unnecessary-renders",
    category=Category.PERFORMANCE,
    severity=Severity.MEDIUM,
    detector=detect_inline_handlers,
    description="Inline functions cause unnecessary re-renders",
    suggested_fix="Use the useCallback hook or define handlers outside render",
    impact_kind=ImpactKind.RENDER,
    impact="Child components re-render on every parent render",
  ),
  Rule(
    rule_id="list-virtualization",
    category=Category.PERFORMANCE,
    severity=Severity.HIGH,
    detector=detect_large_lists,
    description="Large lists should use virtualization",
    suggested_fix="Consider react-window or react-virtualized for large lists",
    impact_kind=ImpactKind.RENDER,
    impact="Rendering many DOM nodes slows down the page",
  ),
  Rule(
    rule_id="memo-optimization",
    category=Category.PERFORMANCE,
    severity=Severity.LOW,
    detector=detect_missing_memo,
    description="Consider using React.memo for pure components",
    suggested_fix="Wrap the component with React.memo to skip unnecessary re-renders",
    impact_kind=ImpactKind.RENDER,
    impact="Component re-renders whenever its parent re-renders",
    fix_id="memo-wrap",
  ),
  Rule(
    rule_id="heavy-computations",
    category=Category.PERFORMANCE,
    severity=Severity.MEDIUM,
    detector=detect_unmemoized_computation,
    description="Heavy computations should be memoized",
    suggested_fix="Use the useMemo hook to memoize expensive calculations",
    impact_kind=ImpactKind.RUNTIME,
    impact="Calculations run on every render",
  ),
  Rule(
    rule_id="bundle-size",
    category=Category.PERFORMANCE,
    severity=Severity.HIGH,
    detector=detect_heavy_imports,
    description="Large library imports increase bundle size",
    suggested_fix="Import specific functions or use a tree-shakeable alternative",
    impact_kind=ImpactKind.BUNDLE,
    impact="Slower initial page load",
  ),
)

RULES_BY_ID: Dict[str, Rule] = {rule.rule_id: rule for rule in RULES}


def rules_for(category: Category) -> Tuple[Rule, ...]:
  """The registered rules of one category, in registry order."""
  return tuple(rule for rule in RULES if rule.category == category)
