"""
batchscribe.transcribe.discovery - Transcript output lookup.

Whisper names its output after the audio file but sometimes inserts extra
metadata (e.g. a detected language tag) before the extension. The lookup is
kept separate from the engine so it can be tested against plain listings and
swapped if the naming contract changes.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from batchscribe.exceptions import TranscriptNotFoundError

TRANSCRIPT_SUFFIX = ".srt"


def find_transcript_name(
    names: Iterable[str],
    stem: str,
    suffix: str = TRANSCRIPT_SUFFIX,
) -> str | None:
    """Pick the transcript file name from a directory listing.

    Args:
        names: Entry names, in the order they should be considered
        stem: Audio base name the transcript should start with
        suffix: Transcript extension

    Returns:
        ``stem + suffix`` if listed, otherwise the first name of the form
        ``<stem>.<tag><suffix>``, or None. A bare prefix match such as
        ``talk-part2.srt`` for ``talk`` belongs to another file and is ignored.
    """
    names = list(names)
    expected = f"{stem}{suffix}"
    if expected in names:
        return expected
    tagged_prefix = f"{stem}."
    for name in names:
        if name.startswith(tagged_prefix) and name.endswith(suffix):
            return name
    return None


def locate_transcript(directory: Path, stem: str, suffix: str = TRANSCRIPT_SUFFIX) -> Path:
    """Find the transcript Whisper wrote for ``stem`` inside ``directory``.

    Raises:
        TranscriptNotFoundError: If no candidate file exists
    """
    expected = directory / f"{stem}{suffix}"
    if expected.is_file():
        return expected

    name = find_transcript_name(sorted(os.listdir(directory)), stem, suffix)
    if name is None or not (directory / name).is_file():
        raise TranscriptNotFoundError(expected)
    return directory / name
