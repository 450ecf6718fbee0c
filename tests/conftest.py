"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

SAMPLE_SRT = """1
00:00:00,000 --> 00:00:02,500
Hello world.

2
00:00:02,500 --> 00:00:05,000
This is a test.
"""


class FakeEngines:
    """Stand-ins for the FFmpeg and Whisper command lines.

    Each fake follows the real tool's contract: FFmpeg writes the path given
    as its last argument, Whisper writes ``<stem>.srt`` into ``--output_dir``.
    """

    def __init__(self) -> None:
        self.ffmpeg_calls: list[list[str]] = []
        self.whisper_calls: list[list[str]] = []
        self.ffmpeg_fail: set[str] = set()
        self.whisper_fail: set[str] = set()
        self.ffmpeg_writes_output = True
        self.whisper_writes_output = True
        self.whisper_writes_before_failing = False
        self.whisper_name_tag = ""
        self.transcript = SAMPLE_SRT
        self.texts: dict[str, str] = {}
        self.probe_calls = 0

    def ffmpeg(self, cmd: Sequence[str], label: str) -> int:
        cmd = list(cmd)
        self.ffmpeg_calls.append(cmd)
        source = Path(cmd[cmd.index("-i") + 1])
        if source.name in self.ffmpeg_fail:
            return 1
        if self.ffmpeg_writes_output:
            Path(cmd[-1]).write_bytes(b"RIFF0000WAVEfmt ")
        return 0

    def whisper(self, cmd: Sequence[str], label: str) -> int:
        cmd = list(cmd)
        self.whisper_calls.append(cmd)
        audio = Path(cmd[1])
        failing = audio.stem in self.whisper_fail
        if failing and not self.whisper_writes_before_failing:
            return 2
        if self.whisper_writes_output:
            output_dir = Path(cmd[cmd.index("--output_dir") + 1])
            (output_dir / f"{audio.stem}{self.whisper_name_tag}.srt").write_text(
                self.texts.get(audio.stem, self.transcript), encoding="utf-8"
            )
        return 2 if failing else 0

    def probe(self) -> str:
        self.probe_calls += 1
        return "cpu"

    @property
    def call_count(self) -> int:
        return len(self.ffmpeg_calls) + len(self.whisper_calls)


@pytest.fixture
def fake_engines(monkeypatch: pytest.MonkeyPatch) -> FakeEngines:
    """Replace both engines, binary lookup and the hardware probe."""
    engines = FakeEngines()
    monkeypatch.setattr("batchscribe.extract.audio.run_streaming", engines.ffmpeg)
    monkeypatch.setattr("batchscribe.transcribe.engine.run_streaming", engines.whisper)
    monkeypatch.setattr("batchscribe.extract.audio.require_binary", lambda name: name)
    monkeypatch.setattr("batchscribe.transcribe.engine.require_binary", lambda name: name)
    monkeypatch.setattr("batchscribe.transcribe.engine.probe_device", engines.probe)
    monkeypatch.setattr("batchscribe.pipeline.probe_device", engines.probe)
    return engines


@pytest.fixture
def media_dir(tmp_path: Path) -> Path:
    """Create an input directory with a mix of media and non-media files."""
    directory = tmp_path / "lectures"
    directory.mkdir()
    (directory / "intro.mp4").write_bytes(b"fake video")
    (directory / "talk.MOV").write_bytes(b"fake video")
    (directory / "podcast.mp3").write_bytes(b"fake audio")
    (directory / "notes.txt").write_text("not media")
    (directory / "cover.jpg").write_bytes(b"fake image")
    return directory


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"
