"""Timeline export and clock formatting for sentiment segments."""

from pathlib import Path
from typing import Sequence

from sentcut.models import SentimentSegment


def format_clock(seconds: float) -> str:
    """Format seconds as ``m:ss``, the way cut points are shown to users."""
    mins = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{mins}:{secs:02d}"


def _format_srt_time(seconds: float) -> str:
    total_ms = round(seconds * 1000)
    h, rest = divmod(total_ms, 3_600_000)
    m, rest = divmod(rest, 60_000)
    s, ms = divmod(rest, 1000)
    return f"{h:02d}:{m:02d}:{s:02d},{ms:03d}"


def _format_vtt_time(seconds: float) -> str:
    return _format_srt_time(seconds).replace(",", ".")


def _cue_text(seg: SentimentSegment) -> str:
    return f"[{seg.sentiment} {seg.score * 100:.1f}%] {seg.text}".rstrip()


def _write_srt(segments: Sequence[SentimentSegment], path: Path) -> None:
    lines: list[str] = []
    for i, seg in enumerate(segments, 1):
        lines.append(str(i))
        lines.append(f"{_format_srt_time(seg.start_time)} --> {_format_srt_time(seg.end_time)}")
        lines.append(_cue_text(seg))
        lines.append("")
    path.write_text("\n".join(lines), encoding="utf-8")


def _write_vtt(segments: Sequence[SentimentSegment], path: Path) -> None:
    lines: list[str] = ["WEBVTT", ""]
    for seg in segments:
        lines.append(f"{_format_vtt_time(seg.start_time)} --> {_format_vtt_time(seg.end_time)}")
        lines.append(_cue_text(seg))
        lines.append("")
    path.write_text("\n".join(lines), encoding="utf-8")


def write_timeline(
    segments: Sequence[SentimentSegment],
    path: str | Path,
    fmt: str = "srt",
) -> Path:
    """Write one subtitle cue per segment, labeled with its sentiment."""
    path = Path(path)
    if fmt == "vtt":
        _write_vtt(segments, path)
    elif fmt == "srt":
        _write_srt(segments, path)
    else:
        raise ValueError(f"Unsupported timeline format: {fmt}")
    return path
