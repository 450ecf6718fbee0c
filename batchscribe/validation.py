"""
batchscribe.validation - Input and dependency checks.

Validates the input directory and locates engine binaries before any
processing starts.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from batchscribe.exceptions import (
    DependencyError,
    InputNotADirectoryError,
    InputNotFoundError,
)

INSTALL_HINTS = {
    "ffmpeg": "Install with: brew install ffmpeg (macOS) or apt install ffmpeg (Linux)",
    "whisper": "Install with: pip install openai-whisper",
}


def validate_input_directory(path: Path) -> Path:
    """Check that a path exists and is a directory.

    Args:
        path: Candidate input directory

    Returns:
        The same path

    Raises:
        InputNotFoundError: If the path doesn't exist
        InputNotADirectoryError: If the path is not a directory
    """
    if not path.exists():
        raise InputNotFoundError(path)

    if not path.is_dir():
        raise InputNotADirectoryError(path)

    return path


def require_binary(name: str) -> str:
    """Resolve an engine executable on PATH.

    Args:
        name: Executable name (e.g. "ffmpeg", "whisper")

    Returns:
        Absolute path to the executable

    Raises:
        DependencyError: If the executable is not on PATH
    """
    path = shutil.which(name)
    if not path:
        raise DependencyError(name, f"{name} not found in PATH", INSTALL_HINTS.get(name))
    return path
