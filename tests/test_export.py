"""Tests for clock formatting and timeline export."""

from pathlib import Path

import pytest

from sentcut.export import format_clock, write_timeline
from sentcut.models import SentimentSegment

SEGMENTS = [
    SentimentSegment(start_time=0, end_time=15, sentiment="positive", score=0.85, text="Welcome!"),
    SentimentSegment(start_time=15, end_time=30.5, sentiment="neutral", score=0.5, text="Context."),
]


class TestFormatClock:
    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, "0:00"), (9.9, "0:09"), (60, "1:00"), (75, "1:15"), (3725, "62:05")],
    )
    def test_format(self, seconds, expected):
        assert format_clock(seconds) == expected


class TestWriteTimeline:
    def test_srt(self, tmp_path: Path):
        out = write_timeline(SEGMENTS, tmp_path / "timeline.srt")
        text = out.read_text(encoding="utf-8")
        assert text.startswith("1\n00:00:00,000 --> 00:00:15,000\n[positive 85.0%] Welcome!\n")
        assert "00:00:15,000 --> 00:00:30,500" in text

    def test_vtt(self, tmp_path: Path):
        out = write_timeline(SEGMENTS, tmp_path / "timeline.vtt", fmt="vtt")
        text = out.read_text(encoding="utf-8")
        assert text.startswith("WEBVTT\n\n")
        assert "00:00:15.000 --> 00:00:30.500" in text
        assert "[neutral 50.0%] Context." in text

    def test_milliseconds_carry_into_seconds(self, tmp_path: Path):
        segments = [
            SentimentSegment(start_time=1.9996, end_time=59.9999, sentiment="positive", score=0.5),
            SentimentSegment(start_time=3599.9996, end_time=3601.25, sentiment="neutral", score=0.5),
        ]
        text = write_timeline(segments, tmp_path / "carry.srt").read_text(encoding="utf-8")
        assert "00:00:02,000 --> 00:01:00,000" in text
        assert "01:00:00,000 --> 01:00:01,250" in text

    def test_unknown_format(self, tmp_path: Path):
        with pytest.raises(ValueError, match="Unsupported"):
            write_timeline(SEGMENTS, tmp_path / "x.txt", fmt="txt")
