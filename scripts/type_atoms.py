#!/usr/bin/env python
"""Compatibility wrapper for pltyper.cli.type_atoms."""
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pltyper.cli.type_atoms import main


if __name__ == '__main__':
    sys.exit(main())
