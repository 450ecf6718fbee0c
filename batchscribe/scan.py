"""
batchscribe.scan - Directory scanning.

Lists the direct children of an input directory and keeps recognized
audio and video files, in the order the filesystem returns them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from batchscribe.validation import validate_input_directory

VIDEO_EXTENSIONS = frozenset(
    {".mp4", ".mov", ".mkv", ".avi", ".webm", ".m4v", ".flv", ".wmv", ".mpeg", ".mpg"}
)
AUDIO_EXTENSIONS = frozenset({".wav", ".mp3", ".m4a", ".aac", ".flac", ".ogg", ".opus", ".wma"})

# Audio already in this container is handed to Whisper without normalization.
RAW_AUDIO_EXTENSION = ".wav"


class MediaKind(Enum):
    VIDEO = "video"
    AUDIO = "audio"


def media_kind(path: Path) -> MediaKind | None:
    """Classify a path by its (case-insensitive) extension."""
    suffix = path.suffix.lower()
    if suffix in VIDEO_EXTENSIONS:
        return MediaKind.VIDEO
    if suffix in AUDIO_EXTENSIONS:
        return MediaKind.AUDIO
    return None


def is_media_file(path: Path) -> bool:
    return media_kind(path) is not None


@dataclass(frozen=True)
class MediaFile:
    """A recognized media file on disk."""

    path: Path

    @property
    def kind(self) -> MediaKind:
        kind = media_kind(self.path)
        if kind is None:
            raise ValueError(f"Unrecognized media extension: {self.path.name}")
        return kind

    @property
    def base_name(self) -> str:
        return self.path.stem

    @property
    def needs_extraction(self) -> bool:
        """True for video, and for audio not already in the raw target format."""
        if self.kind is MediaKind.VIDEO:
            return True
        return self.path.suffix.lower() != RAW_AUDIO_EXTENSION


def scan_media_directory(directory: Path) -> list[MediaFile]:
    """List recognized media files directly inside a directory.

    Args:
        directory: Directory to scan (not recursed)

    Returns:
        MediaFile entries in filesystem listing order; empty if none match

    Raises:
        InputNotFoundError: If the directory does not exist
        InputNotADirectoryError: If the path is not a directory
    """
    validate_input_directory(directory)

    files = []
    for name in os.listdir(directory):
        path = directory / name
        if path.is_file() and is_media_file(path):
            files.append(MediaFile(path))
    return files
