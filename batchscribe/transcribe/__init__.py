"""
batchscribe.transcribe - Whisper transcription engine.

Pipeline Stage 2: run the Whisper CLI on extracted audio and locate the SRT
file it writes, which Whisper may name unpredictably.
"""

from __future__ import annotations
