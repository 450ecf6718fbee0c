"""
batchscribe.io - Transcript file access.

A transcript on disk is the only record that a media file is done, so
transcripts are read back verbatim and only ever written atomically.
"""

from __future__ import annotations

import tempfile
from pathlib import Path


def read_text(path: Path) -> str:
    """Read a transcript (or any engine output) as UTF-8.

    The content is returned as is; SRT structure is never checked.
    """
    with open(path, encoding="utf-8") as f:
        return f.read()


def write_text(path: Path, content: str) -> None:
    """Persist a transcript under its final name in one step.

    The text goes to a hidden sibling temp file which then replaces ``path``,
    so an interrupted run never leaves a truncated transcript that a later run
    would mistake for a finished one.

    Args:
        path: Final transcript path, ``<outputDir>/<baseName>.srt``
        content: Transcript text
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        prefix=".",
        delete=False,
        suffix=".tmp",
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(content)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
    tmp_path.replace(path)
