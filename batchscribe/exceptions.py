"""
batchscribe.exceptions - Custom exception classes.

All batchscribe-specific exceptions inherit from BatchscribeError.
"""

from __future__ import annotations

from pathlib import Path


class BatchscribeError(Exception):
    """Base exception for all batchscribe errors."""

    pass


class InputNotFoundError(BatchscribeError):
    """Input directory does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Directory not found: {path}")


class InputNotADirectoryError(BatchscribeError):
    """Input path exists but is not a directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Not a directory: {path}")


class ConfigError(BatchscribeError):
    """Configuration loading or validation error."""

    pass


class ExtractionError(BatchscribeError):
    """Audio extraction error."""

    def __init__(self, message: str, exit_code: int | None = None):
        self.exit_code = exit_code
        super().__init__(message)


class ExtractionTimeout(ExtractionError):
    """Extracted audio never became visible on disk."""

    def __init__(self, path: Path, timeout: float):
        self.path = path
        self.timeout = timeout
        super().__init__(f"Audio file did not appear within {timeout:g}s: {path}")


class TranscriptionError(BatchscribeError):
    """Transcription error."""

    def __init__(self, message: str, exit_code: int | None = None):
        self.exit_code = exit_code
        super().__init__(message)


class TranscriptNotFoundError(TranscriptionError):
    """Transcription engine finished but no transcript file was found."""

    def __init__(self, expected_path: Path):
        self.expected_path = expected_path
        super().__init__(f"Transcription file not found at {expected_path}")


class ProcessingError(BatchscribeError):
    """Processing a single media file failed."""

    def __init__(self, file: Path, cause: BaseException):
        self.file = file
        self.cause = cause
        super().__init__(f"{file.name}: {cause}")


class DependencyError(BatchscribeError):
    """Required dependency missing or misconfigured."""

    def __init__(self, dependency: str, message: str, install_hint: str | None = None):
        self.dependency = dependency
        self.message = message
        self.install_hint = install_hint
        super().__init__(f"{dependency}: {message}")
