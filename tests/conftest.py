"""Pytest bootstrap for local source imports.

Ensure ``import window_switcher`` resolves to ``src/`` even when the
package is not installed.
"""

import sys
from pathlib import Path


SRC_ROOT = Path(__file__).resolve().parent.parent / "src"
SRC_ROOT_STR = str(SRC_ROOT)

if SRC_ROOT_STR not in sys.path:
    sys.path.insert(0, SRC_ROOT_STR)
