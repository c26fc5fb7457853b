# src/meshmerge/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

# src/meshmerge/utils/pathing.py -> repository checkout
PROJECT_ROOT = Path(__file__).resolve().parents[3]
MOCK_DIR = PROJECT_ROOT / "mock_files"


def mock_file_path(filename: Union[str, Path]) -> Path:
    """Sample mesh file shipped in ``mock_files/``."""
    return MOCK_DIR / filename
