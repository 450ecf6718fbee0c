"""
batchscribe.utils - Shared utility functions.
"""

from __future__ import annotations

from pathlib import Path

TRANSCRIPTS_ROOT = "transcripts"
OUTPUT_DIR_SUFFIX = "_transcriptions"


def format_size(path: Path) -> str:
    """Size of an extracted WAV or transcript for logs and the summary table.

    Returns "-" when the file is missing, e.g. for a failed file's row.
    """
    if not path.exists():
        return "-"
    size: float = path.stat().st_size
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def output_dir_for(input_dir: Path, root: Path | None = None) -> Path:
    """Return the transcript directory for an input directory.

    Args:
        input_dir: Directory being transcribed
        root: Base directory (defaults to the current working directory)

    Returns:
        ``<root>/transcripts/<input_dir name>_transcriptions``
    """
    base = root if root is not None else Path.cwd()
    name = input_dir.resolve().name
    return base / TRANSCRIPTS_ROOT / f"{name}{OUTPUT_DIR_SUFFIX}"
