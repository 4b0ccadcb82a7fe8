#!/usr/bin/env python3
"""
gitsource - Main Entry Point

Acquire git repositories and derive GitHub raw-content URLs.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from gitsource.cli import main

if __name__ == "__main__":
    main()
