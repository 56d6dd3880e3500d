#!/usr/bin/env python3
"""
wiki-tui Configuration Launcher

Runs the config bootstrapper from the src/wiki_tui package.
"""

import sys
from pathlib import Path

# Add the src directory to Python path so we can import wiki_tui
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from wiki_tui.main import main

if __name__ == "__main__":
    raise SystemExit(main())
