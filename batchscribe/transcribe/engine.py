"""
batchscribe.transcribe.engine - Whisper CLI transcription.

Invokes the ``whisper`` command for one audio file, picking CUDA when a quick
hardware probe says it is available, and returns the SRT text it produced.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from batchscribe.config import ProcessingOptions
from batchscribe.exceptions import TranscriptionError
from batchscribe.io import read_text
from batchscribe.logging import logger
from batchscribe.process import run_streaming
from batchscribe.transcribe.discovery import TRANSCRIPT_SUFFIX, locate_transcript
from batchscribe.validation import require_binary

OUTPUT_FORMAT = "srt"
DEFAULT_DEVICE = "cpu"
PROBE_TIMEOUT = 30

CUDA_PROBE_COMMAND = [
    sys.executable,
    "-c",
    "import torch; print(torch.cuda.is_available())",
]


def probe_device() -> str:
    """Return "cuda" if the probe reports a usable GPU, else "cpu".

    The probe is best effort: a missing tool, a failure or a timeout all
    fall back to CPU with a warning.
    """
    try:
        proc = subprocess.run(
            CUDA_PROBE_COMMAND,
            capture_output=True,
            text=True,
            timeout=PROBE_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning("Hardware probe failed (%s); using %s", e, DEFAULT_DEVICE)
        return DEFAULT_DEVICE

    if proc.returncode != 0:
        logger.warning(
            "Hardware probe exited with code %d; using %s", proc.returncode, DEFAULT_DEVICE
        )
        return DEFAULT_DEVICE

    if proc.stdout.strip().lower() == "true":
        logger.info("CUDA available, transcribing on GPU")
        return "cuda"

    logger.info("CUDA not available, transcribing on CPU")
    return DEFAULT_DEVICE


def build_whisper_command(
    whisper: str,
    audio_path: Path,
    output_dir: Path,
    options: ProcessingOptions,
    device: str,
) -> list[str]:
    """Build the Whisper CLI command. ``auto`` language omits ``--language``."""
    cmd = [
        whisper,
        str(audio_path),
        "--model",
        options.model,
        "--output_format",
        OUTPUT_FORMAT,
        "--output_dir",
        str(output_dir),
        "--device",
        device,
        "--threads",
        str(os.cpu_count() or 1),
    ]
    if not options.auto_language:
        cmd.extend(["--language", options.language])
    return cmd


def transcribe_audio_to_file(
    audio_path: Path,
    options: ProcessingOptions,
    output_dir: Path | None = None,
    device: str | None = None,
) -> tuple[Path, str]:
    """Transcribe an audio file and return the transcript path and text.

    Args:
        audio_path: Path to audio file (16kHz WAV recommended)
        options: Model tier and language
        output_dir: Directory Whisper writes into (defaults to the audio's)
        device: Whisper device ("cuda" or "cpu"); probed when None

    Returns:
        Tuple of (path Whisper wrote, transcript text)

    Raises:
        DependencyError: If the Whisper CLI is not installed
        TranscriptionError: If Whisper exits nonzero
        TranscriptNotFoundError: If Whisper's output cannot be located
    """
    whisper = require_binary("whisper")
    output_dir = output_dir if output_dir is not None else audio_path.parent

    if device is None:
        device = probe_device()
    if options.auto_language:
        logger.info("Transcribing %s (model %s, auto language)", audio_path.name, options.model)
    else:
        logger.info(
            "Transcribing %s (model %s, language %s)",
            audio_path.name,
            options.model,
            options.language,
        )

    cmd = build_whisper_command(whisper, audio_path, output_dir, options, device)
    try:
        exit_code = run_streaming(cmd, label="whisper")
    except OSError as e:
        raise TranscriptionError(f"Could not run Whisper: {e}") from e

    if exit_code != 0:
        raise TranscriptionError(
            f"Whisper failed with exit code {exit_code}",
            exit_code=exit_code,
        )

    transcript_path = locate_transcript(output_dir, audio_path.stem, TRANSCRIPT_SUFFIX)
    logger.debug("Found transcription file at %s", transcript_path)

    text = read_text(transcript_path)
    logger.info("Transcription loaded, length: %d characters", len(text))
    return transcript_path, text


def transcribe_audio(
    audio_path: Path,
    options: ProcessingOptions,
    output_dir: Path | None = None,
    device: str | None = None,
) -> str:
    """Transcribe an audio file and return the SRT text."""
    _, text = transcribe_audio_to_file(
        audio_path,
        options,
        output_dir=output_dir,
        device=device,
    )
    return text
