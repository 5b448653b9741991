#!/usr/bin/env python3
"""
Repair a generated project JSON file from a source checkout.

Equivalent to the ``layout-repair`` console script.
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from layout_repair.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
