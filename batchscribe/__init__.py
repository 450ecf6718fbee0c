"""
batchscribe - Batch media transcription toolkit.

Turns a directory of audio and video files into SRT transcripts through a
sequential pipeline: directory scan → audio extraction (FFmpeg) →
transcription (Whisper CLI) → transcript persistence.
"""

__version__ = "0.1.0"
