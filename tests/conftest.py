"""Pytest configuration shared by all test suites"""

import sys
from pathlib import Path

# Add src/ to path so tests run without installing the package
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))
