"""
Property tests for the auto-remediation sequence.

Markup is drawn from tags whose attributes carry quoted `>` characters and
`{...}` expressions, the shapes that most easily confuse a lexical tag match.
"""

from hypothesis import given, settings, strategies as st

from ui_splice.core.quality import auto_remediate

TAGS = ["img", "Image", "button", "div", "input"]

ATTRIBUTES = [
  'src="a.png"',
  'alt="x > y"',
  "alt=''",
  'loading="eager"',
  'type="submit"',
  "title='a > b'",
  'aria-label="Close"',
  "onClick={() => count > 1 && go()}",
  'className={cn("a", b > 1)}',
]

TEXT = ["", "Save", "{label}", "Total: {total}"]


@st.composite
def elements(draw):
  tag = draw(st.sampled_from(TAGS))
  attrs = draw(st.lists(st.sampled_from(ATTRIBUTES), max_size=4, unique=True))
  close = draw(st.sampled_from([" />", "/>", ">"]))
  return "<" + " ".join([tag, *attrs]) + close, attrs


@st.composite
def components(draw):
  parts = draw(st.lists(st.tuples(elements(), st.sampled_from(TEXT)), min_size=1, max_size=6))
  lines = [opening + text for (opening, _), text in parts]
  if draw(st.booleans()):
    lines = ["const Card = ({ title }) => (", *lines, ");", "export default Card;"]
  attrs = [attr for (_, element_attrs), _ in parts for attr in element_attrs]
  return "\n".join(lines), attrs


@given(case=components())
@settings(max_examples=200)
def test_remediation_is_idempotent(case):
  code, _ = case
  once, _ = auto_remediate(code)
  twice, again = auto_remediate(once)
  assert twice == once
  assert again == []


@given(case=components())
@settings(max_examples=200)
def test_remediation_keeps_attribute_values_intact(case):
  code, attrs = case
  fixed, _ = auto_remediate(code)
  for attr in attrs:
    assert attr in fixed
  assert fixed.count('"') % 2 == 0
  assert fixed.count("'") % 2 == 0
