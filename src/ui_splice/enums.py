"""
Enumerations for ui-splice.

This module defines the standard enumerations used across the pipeline for
dialect selection, import grouping and finding categorization.
"""

from enum import Enum


class Dialect(str, Enum):
  """
  Broad family of a source file, selected from its extension.
  """

  SCRIPT = "script"
  MARKUP = "markup"
  STYLE = "style"
  DOC = "doc"


class OriginClass(str, Enum):
  """
  Bucket an import declaration is grouped into for canonical ordering.

  The declaration order of the members is the emission order of the buckets.
  """

  FRAMEWORK = "framework"
  THIRD_PARTY = "thirdParty"
  LOCAL = "local"
  STYLE = "style"


class Category(str, Enum):
  """
  Scoring category of an analyzer rule.
  """

  ACCESSIBILITY = "accessibility"
  PERFORMANCE = "performance"


class Severity(str, Enum):
  """
  Severity of a finding.

  Accessibility rules use ERROR/WARNING/INFO, performance rules use HIGH/MEDIUM/LOW.
  """

  ERROR = "error"
  WARNING = "warning"
  INFO = "info"
  HIGH = "high"
  MEDIUM = "medium"
  LOW = "low"


class ImpactKind(str, Enum):
  """
  Runtime area a performance finding affects.
  """

  RENDER = "render"
  MEMORY = "memory"
  BUNDLE = "bundle"
  RUNTIME = "runtime"


class ConformanceLevel(str, Enum):
  """WCAG conformance level an accessibility rule maps to."""

  A = "A"
  AA = "AA"
  AAA = "AAA"
