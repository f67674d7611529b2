"""
Best-effort Repair of Rejected Source Text.

When the engine rejects a text, the normalizer still hands the caller a
candidate built from purely lexical fixes:

1.  **Quote balancing**: an odd number of `"` or `'` characters gets a closing
    quote appended.
2.  **Bracket balancing**: closers for unmatched `{`, `[` and `(` are appended,
    innermost first.
3.  **Suggestions**: the engine's error message is matched against a fixed
    catalog of substrings to produce human-readable hints.

The repair never removes text; it only appends.
"""

from typing import List, Tuple

QUOTE_CHARS = ('"', "'")

BRACKET_PAIRS = {"{": "}", "[": "]", "(": ")"}

SUGGESTION_CATALOG: Tuple[Tuple[str, str], ...] = (
  ("Unexpected token", "Check for a missing comma, bracket or closing JSX tag near the reported position."),
  ("Unterminated", "Close the unterminated string, template literal, regular expression or comment."),
  ("Expected", "A required token is missing; verify that brackets and parentheses are balanced."),
)

GENERIC_SUGGESTION = "Review the generated code near the reported position for syntax errors."


def balance_quotes(text: str) -> str:
  """
  Appends a closing quote for each quote character that occurs an odd number of times.

  Args:
      text: Source text.

  Returns:
      str: The text, possibly with `"` and/or `'` appended.
  """
  repaired = text
  for quote in QUOTE_CHARS:
    if text.count(quote) % 2 == 1:
      repaired += quote
  return repaired


def missing_closers(text: str) -> str:
  """
  Computes the closing brackets needed to balance `text`.

  Stray closers without an opener are ignored.

  Args:
      text: Source text.

  Returns:
      str: Closers for the unmatched openers, innermost first.
  """
  stack: List[str] = []
  closer_to_opener = {v: k for k, v in BRACKET_PAIRS.items()}

  for char in text:
    if char in BRACKET_PAIRS:
      stack.append(char)
    elif char in closer_to_opener:
      opener = closer_to_opener[char]
      # Pop back to the nearest matching opener; mismatched closers are skipped.
      for idx in range(len(stack) - 1, -1, -1):
        if stack[idx] == opener:
          del stack[idx]
          break

  return "".join(BRACKET_PAIRS[opener] for opener in reversed(stack))


def repair_candidate(text: str) -> str:
  """
  Applies quote balancing followed by bracket balancing.

  Args:
      text: The text the engine rejected.

  Returns:
      str: The repaired candidate.
  """
  repaired = balance_quotes(text)
  return repaired + missing_closers(text)


def suggest_fixes(error_message: str) -> List[str]:
  """
  Maps an engine error message to suggestions.

  Args:
      error_message: Raw error text from the engine.

  Returns:
      List[str]: Every matching catalog suggestion, or a single generic one.
  """
  suggestions = [hint for needle, hint in SUGGESTION_CATALOG if needle in error_message]
  return suggestions or [GENERIC_SUGGESTION]
