"""
Root conftest - shared pytest configuration and fixtures.
Ensures nvr_console package is discoverable when running pytest from the repository root.
"""
import os
import sys
from pathlib import Path

# Ensure repository root is in path for 'from nvr_console...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# Tests never talk to MongoDB unless a test wires it explicitly
os.environ.setdefault("PERSISTENCE_BACKEND", "memory")
