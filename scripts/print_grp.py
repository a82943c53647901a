#!/usr/bin/env python3
"""
Print a summary and directory listing of a GRP archive.

Usage: uv run python scripts/print_grp.py [GRP]
"""

import sys

from buildkit.cli import main

if __name__ == '__main__':
    grp = sys.argv[1:2]
    status = main(['grp', 'info', *grp])
    if status == 0:
        status = main(['grp', 'list', *grp])
    raise SystemExit(status)
