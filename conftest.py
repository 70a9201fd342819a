"""
Root conftest.py for pytest configuration.
"""
import sys
from pathlib import Path

# Put the project root on sys.path so tests can import the ``src`` packages
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))
