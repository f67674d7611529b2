"""
ui-splice Package.

Prepares generated UI component source (JSX/TSX and friends) for insertion
into an existing project file: canonical formatting, accessibility and
performance auto-fixes, and a merged, de-duplicated import block.

Usage
-----

Simple String Integration
^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import ui_splice
    code = "const Card = () => <img src='a.png' />;"
    print(ui_splice.integrate(code, file_name_hint="Card.jsx"))

Advanced Usage (Pipeline)
^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from ui_splice import IntegrationPipeline, IntegrationRequest

    pipeline = IntegrationPipeline()
    request = IntegrationRequest(source_text=code, file_name_hint="Card.tsx", destination_text=existing)
    result = await pipeline.integrate(request)

    print(result.report.accessibility_score)
    print(result.final_text)
"""

from typing import Any, Optional

from ui_splice.config import StyleConfig
from ui_splice.core.formatter import StyleNormalizer
from ui_splice.core.imports import ImportEngine
from ui_splice.core.pipeline import IntegrationPipeline, IntegrationRequest, IntegrationResult
from ui_splice.core.quality import QualityOptimizer

__version__ = "0.0.1"


def integrate(
  code: str,
  file_name_hint: Optional[str] = None,
  destination_text: Optional[str] = None,
  pipeline: Optional[IntegrationPipeline] = None,
  **style_overrides: Any,
) -> str:
  """
  Integrates a string of generated component code.

  A convenience wrapper around `IntegrationPipeline.integrate_sync`.

  Args:
      code: Generated component text.
      file_name_hint: Destination file name; selects the dialect.
      destination_text: Current text of the destination file, if any.
      pipeline: Pipeline to use. Defaults to a fresh `IntegrationPipeline`.
      **style_overrides: Style options (e.g. `tabWidth=4`).

  Returns:
      str: The final text ready for insertion.
  """
  pipeline = pipeline or IntegrationPipeline()
  request = IntegrationRequest(
    source_text=code,
    file_name_hint=file_name_hint,
    destination_text=destination_text,
    style_overrides=style_overrides,
  )
  return pipeline.integrate_sync(request).final_text


__all__ = [
  "ImportEngine",
  "IntegrationPipeline",
  "IntegrationRequest",
  "IntegrationResult",
  "QualityOptimizer",
  "StyleConfig",
  "StyleNormalizer",
  "integrate",
  "__version__",
]
