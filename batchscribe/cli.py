"""
batchscribe.cli - Typer CLI entry point.

Transcribes every media file in one directory.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from batchscribe import __version__
from batchscribe.config import AUTO_LANGUAGE, MODEL_TIERS, build_options
from batchscribe.exceptions import (
    ConfigError,
    InputNotADirectoryError,
    InputNotFoundError,
)
from batchscribe.logging import configure_logging
from batchscribe.validation import validate_input_directory

app = typer.Typer(
    name="batchscribe",
    help="Batch media transcription.\n\n"
    "Extracts audio with FFmpeg and transcribes it with Whisper, writing one "
    "SRT file per media file.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"batchscribe {__version__}")
        raise typer.Exit()


@app.command()
def main(
    directory: Path = typer.Argument(..., help="Directory of audio/video files"),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help=f"Whisper model size: {', '.join(MODEL_TIERS)} (default: base)",
    ),
    language: str | None = typer.Option(
        None,
        "--language",
        "-l",
        help=f"Language code, or '{AUTO_LANGUAGE}' to auto-detect (default: en)",
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="YAML file with model and/or language"
    ),
    keep_audio: bool = typer.Option(
        False, "--keep-audio", help="Keep extracted WAV files for inspection"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Show engine output"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Transcribe all media files in DIRECTORY.

    Transcripts go to ./transcripts/<DIRECTORY name>_transcriptions. Files that
    already have a transcript there are skipped.
    """
    configure_logging(verbose)

    try:
        validate_input_directory(directory)
    except (InputNotFoundError, InputNotADirectoryError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    try:
        options = build_options(config, model=model, language=language)
    except ConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    from batchscribe.pipeline import transcribe_directory

    console.print(f"[cyan]Transcribing {directory} with Whisper ({options.model} model)...[/cyan]\n")

    try:
        results = transcribe_directory(
            directory,
            options,
            keep_audio=keep_audio,
            console=console,
        )
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if results["total"] == 0:
        console.print(f"[yellow]No media files found in {directory}[/yellow]")
        raise typer.Exit(0)

    console.print(
        f"\n[green]✓[/green] Transcribed {results['transcribed']}, "
        f"skipped {results['skipped']}, failed {results['failed']}"
    )
    console.print(f"Transcriptions saved to: {results['output_dir']}")
