"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

# Put the project root (for ``tests``, ``stats`` and ``benchmarks``) and
# ``src`` on sys.path so the suite runs from a plain checkout as well as
# from an installed package.
_project_root = Path(__file__).resolve().parent
for _path in (str(_project_root / "src"), str(_project_root)):
    if _path not in sys.path:
        sys.path.insert(0, _path)
