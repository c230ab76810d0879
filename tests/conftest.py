"""
Pytest configuration for bspgeom tests.
Adds the src directory to sys.path so that `import bspgeom` works without installing,
and the tests directory so that `import test_fixtures` works from any test folder.
"""
import sys
from pathlib import Path

# Add src to the path so imports like 'from bspgeom.partitioning import ...' work
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

tests_path = Path(__file__).parent
if str(tests_path) not in sys.path:
    sys.path.insert(0, str(tests_path))
