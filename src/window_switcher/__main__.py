"""
Window switcher main entry point.
"""

import sys

from window_switcher.core import main

if __name__ == '__main__':
    sys.exit(main())
