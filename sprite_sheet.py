"""Script entry point for sprite sheet generation.

Run from a checkout without installing:

    python sprite_sheet.py 16 16 8 8 --margin 2

For library use, import from the sprite_sheet package:

    from sprite_sheet import Config, generate_sheet_bytes, main
"""
from __future__ import annotations

import sys

from sprite_sheet import main

if __name__ == "__main__":
    sys.exit(main(sys.argv))
