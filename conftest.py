"""
Root conftest - shared pytest configuration and fixtures.
Ensures catalog_api and tests packages are importable when running pytest from the repo root.
"""
import sys
from pathlib import Path

# Ensure repo root is in path for 'from catalog_api...' and 'from tests...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
