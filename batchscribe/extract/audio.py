"""
batchscribe.extract.audio - FFmpeg audio extraction.

Extracts (or normalizes) audio into a 16kHz mono PCM WAV, then waits for the
file to become visible on disk before handing it to transcription.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any

from batchscribe.exceptions import ExtractionError, ExtractionTimeout
from batchscribe.logging import logger
from batchscribe.process import run_streaming
from batchscribe.utils import format_size
from batchscribe.validation import require_binary

SAMPLE_RATE = 16000
CHANNELS = 1
CODEC = "pcm_s16le"

DEFAULT_POLL_INTERVAL = 0.1
DEFAULT_VISIBILITY_TIMEOUT = 10.0


def build_ffmpeg_command(ffmpeg: str, source_path: Path, output_path: Path) -> list[str]:
    """Build the FFmpeg command for a 16kHz mono PCM extraction."""
    return [
        ffmpeg,
        "-y",
        "-i",
        str(source_path),
        "-vn",
        "-acodec",
        CODEC,
        "-ar",
        str(SAMPLE_RATE),
        "-ac",
        str(CHANNELS),
        str(output_path),
    ]


def wait_for_file(
    path: Path,
    timeout: float = DEFAULT_VISIBILITY_TIMEOUT,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> None:
    """Block until a file exists.

    FFmpeg can exit before its output is visible to other processes, so the
    caller polls for a bounded time instead of trusting the exit code alone.

    Raises:
        ExtractionTimeout: If the file does not appear within ``timeout`` seconds
    """
    deadline = time.monotonic() + timeout
    while not path.exists():
        if time.monotonic() >= deadline:
            raise ExtractionTimeout(path, timeout)
        time.sleep(poll_interval)


def extract_audio(
    source_path: Path,
    output_path: Path,
    timeout: float = DEFAULT_VISIBILITY_TIMEOUT,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> dict[str, Any]:
    """Extract audio from a media file using FFmpeg.

    Args:
        source_path: Path to source video or audio file
        output_path: Output path for the 16kHz mono WAV (overwritten)
        timeout: Seconds to wait for the output to appear after FFmpeg exits
        poll_interval: Seconds between visibility checks

    Returns:
        Dict with extraction results

    Raises:
        DependencyError: If FFmpeg is not installed
        ExtractionError: If FFmpeg exits nonzero
        ExtractionTimeout: If the output never appears
    """
    ffmpeg = require_binary("ffmpeg")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info("Extracting audio from %s", source_path.name)
    logger.debug("Audio will be saved to %s", output_path)

    try:
        exit_code = run_streaming(
            build_ffmpeg_command(ffmpeg, source_path, output_path),
            label="ffmpeg",
        )
    except OSError as e:
        raise ExtractionError(f"Could not run FFmpeg: {e}") from e

    if exit_code != 0:
        raise ExtractionError(
            f"FFmpeg extraction failed with exit code {exit_code}",
            exit_code=exit_code,
        )

    wait_for_file(output_path, timeout=timeout, poll_interval=poll_interval)

    size = format_size(output_path)
    logger.info("Audio extraction complete. File size: %s", size)

    return {
        "source": str(source_path),
        "audio": str(output_path),
        "size": size,
    }
