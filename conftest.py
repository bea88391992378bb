"""Root conftest.py to make ``run.py`` importable from the tests."""
import sys
from pathlib import Path

# Add the project root directory to the Python path
ROOT_DIR = Path(__file__).absolute().parent
sys.path.insert(0, str(ROOT_DIR))
