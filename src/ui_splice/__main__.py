"""
Entry point for module execution (``python -m ui_splice``).

This module delegates execution to the CLI handler in ``ui_splice.cli.__main__``.
"""

import sys
from ui_splice.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
