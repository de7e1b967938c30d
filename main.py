#!/usr/bin/env python3
"""BoxingTimer entry point.

Run with:
    python main.py
    python -m boxingtimer
"""

import sys

from boxingtimer.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
