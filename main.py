"""
Checkout convenience entry point.

Run: python main.py
Same as ``python -m login_app``; not installed with the package.
"""
from __future__ import annotations

import sys

from login_app.__main__ import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
