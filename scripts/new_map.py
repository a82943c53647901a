#!/usr/bin/env python3
"""
Write a new single-sector BUILD map.

Usage: uv run python scripts/new_map.py [OUTPUT]
"""

import sys

from buildkit.cli import main

if __name__ == '__main__':
    output = sys.argv[1] if len(sys.argv) > 1 else 'NEWBOARD.MAP'
    raise SystemExit(main(['map', 'new', output]))
