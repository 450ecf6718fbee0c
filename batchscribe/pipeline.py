"""
batchscribe.pipeline - Per-file processing and the batch loop.

Files are processed one at a time. An existing transcript marks a file as
done, so re-running a batch only picks up files that have no transcript yet.
A failure in one file is recorded and the batch moves on.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from batchscribe.config import ProcessingOptions
from batchscribe.exceptions import ProcessingError
from batchscribe.extract.audio import extract_audio
from batchscribe.io import read_text, write_text
from batchscribe.logging import logger
from batchscribe.scan import MediaFile, scan_media_directory
from batchscribe.transcribe.discovery import TRANSCRIPT_SUFFIX
from batchscribe.transcribe.engine import DEFAULT_DEVICE, probe_device, transcribe_audio
from batchscribe.utils import format_size, output_dir_for

AUDIO_SUFFIX = ".wav"


@dataclass(frozen=True)
class TranscriptOutput:
    """A persisted transcript and the media file it came from."""

    base_name: str
    path: Path
    text: str
    reused: bool = False


def transcript_path_for(media: MediaFile, output_dir: Path) -> Path:
    return output_dir / f"{media.base_name}{TRANSCRIPT_SUFFIX}"


def audio_path_for(media: MediaFile, output_dir: Path) -> Path:
    return output_dir / f"{media.base_name}{AUDIO_SUFFIX}"


def _remove_quietly(path: Path, what: str) -> None:
    try:
        path.unlink(missing_ok=True)
        logger.debug("Removed %s %s", what, path)
    except OSError as e:
        logger.warning("Could not remove %s %s: %s", what, path, e)


def process_file(
    media: MediaFile,
    output_dir: Path,
    options: ProcessingOptions,
    keep_audio: bool = False,
    device: str | None = None,
) -> TranscriptOutput:
    """Transcribe one media file unless its transcript already exists.

    Whisper writes into a scratch directory of its own, so a transcript under
    ``output_dir`` only ever appears through the final atomic write, after
    extraction and transcription have both succeeded.

    Args:
        media: File to transcribe
        output_dir: Directory for the transcript and the temporary audio
        options: Model tier and language
        keep_audio: Leave the temporary WAV on disk for inspection
        device: Whisper device; probed when None

    Returns:
        The transcript, with ``reused`` set when it was already on disk

    Raises:
        ProcessingError: If extraction or transcription fails
        OSError: If an existing transcript cannot be read
    """
    transcript_path = transcript_path_for(media, output_dir)
    if transcript_path.exists():
        logger.info("Skipping %s: transcript already exists", media.path.name)
        return TranscriptOutput(
            base_name=media.base_name,
            path=transcript_path,
            text=read_text(transcript_path),
            reused=True,
        )

    output_dir.mkdir(parents=True, exist_ok=True)
    temp_audio = audio_path_for(media, output_dir) if media.needs_extraction else None

    try:
        with tempfile.TemporaryDirectory(
            dir=output_dir,
            prefix=f".{media.base_name}.",
            ignore_cleanup_errors=True,
        ) as scratch:
            try:
                if temp_audio is not None:
                    extract_audio(media.path, temp_audio)
                    audio_path = temp_audio
                else:
                    audio_path = media.path

                text = transcribe_audio(
                    audio_path,
                    options,
                    output_dir=Path(scratch),
                    device=device,
                )
            except Exception as e:
                raise ProcessingError(media.path, e) from e

        write_text(transcript_path, text)
        logger.info("Saved transcription to %s", transcript_path)
    finally:
        if temp_audio is not None and not keep_audio:
            _remove_quietly(temp_audio, "temporary audio")

    return TranscriptOutput(base_name=media.base_name, path=transcript_path, text=text)


def transcribe_directory(
    input_dir: Path,
    options: ProcessingOptions,
    output_dir: Path | None = None,
    keep_audio: bool = False,
    probe_hardware: bool = True,
    console=None,
) -> dict[str, Any]:
    """Transcribe every media file in a directory.

    Args:
        input_dir: Directory of media files (not recursed)
        options: Model tier and language
        output_dir: Transcript directory (defaults to
            ``./transcripts/<input_dir name>_transcriptions``)
        keep_audio: Leave temporary WAV files on disk
        probe_hardware: Probe once for CUDA; when False always use CPU
        console: Optional rich console for output

    Returns:
        Dict with transcription summary

    Raises:
        InputNotFoundError: If the input directory does not exist
        InputNotADirectoryError: If the input path is not a directory
        OSError: If the output directory cannot be created
    """
    from rich.table import Table

    files = scan_media_directory(input_dir)
    output_dir = output_dir if output_dir is not None else output_dir_for(input_dir)

    results: dict[str, Any] = {
        "output_dir": output_dir,
        "total": len(files),
        "transcribed": 0,
        "skipped": 0,
        "failed": 0,
        "errors": [],
    }

    if not files:
        logger.warning("No media files found in %s", input_dir)
        return results

    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Found %d media file(s) in %s", len(files), input_dir)

    device = DEFAULT_DEVICE
    if probe_hardware and any(not transcript_path_for(m, output_dir).exists() for m in files):
        device = probe_device()

    table = Table(title="Transcription")
    table.add_column("File", style="cyan")
    table.add_column("Transcript", style="green")
    table.add_column("Status", style="yellow")

    for index, media in enumerate(files, start=1):
        logger.info("[%d/%d] Processing %s", index, len(files), media.path.name)
        try:
            output = process_file(
                media,
                output_dir,
                options,
                keep_audio=keep_audio,
                device=device,
            )
        except Exception as e:
            logger.error("Failed to process %s: %s", media.path.name, e)
            table.add_row(media.path.name, "-", f"[red]Error: {e}[/red]")
            results["failed"] += 1
            results["errors"].append({"file": str(media.path), "error": str(e)})
            continue

        if output.reused:
            table.add_row(
                media.path.name,
                format_size(output.path),
                "[dim]Skipped (already transcribed)[/dim]",
            )
            results["skipped"] += 1
        else:
            table.add_row(media.path.name, format_size(output.path), "[green]✓ Transcribed[/green]")
            results["transcribed"] += 1

    if console:
        console.print(table)

    logger.info("Transcriptions saved to %s", output_dir)
    return results
