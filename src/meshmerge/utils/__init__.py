# src/meshmerge/utils/__init__.py

from .pathing import MOCK_DIR, PROJECT_ROOT, mock_file_path

__all__ = [
    "MOCK_DIR",
    "PROJECT_ROOT",
    "mock_file_path",
]
