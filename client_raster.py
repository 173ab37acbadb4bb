#!/usr/bin/env python3
#
# PROJECT: triangle-rasterizer
# MODULE: client_raster.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from triangle_rasterizer.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
