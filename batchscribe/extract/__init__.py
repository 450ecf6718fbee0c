"""
batchscribe.extract - Audio extraction from media files.

Pipeline Stage 1: normalize any supported media file into a 16kHz mono
16-bit PCM WAV suitable for Whisper.
"""

from __future__ import annotations
