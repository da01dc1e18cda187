"""Segment processor: filters sentiment segments and merges them into cuts."""

from typing import Sequence

from sentcut.models import (
    ALL,
    NEGATIVE,
    NEUTRAL,
    POSITIVE,
    AnalysisResult,
    CutInterval,
    SentimentSegment,
    Summary,
)

DEFAULT_GAP_THRESHOLD = 5.0


def filter_segments(
    segments: Sequence[SentimentSegment], criterion: str
) -> Sequence[SentimentSegment]:
    """Keep segments whose sentiment equals *criterion*.

    ``"all"`` returns the input as-is. A criterion that is not a known label
    matches nothing.
    """
    if criterion == ALL:
        return segments
    return [s for s in segments if s.sentiment == criterion]


def merge_into_cuts(
    segments: Sequence[SentimentSegment],
    gap_threshold: float = DEFAULT_GAP_THRESHOLD,
) -> list[CutInterval]:
    """Coalesce time-ordered segments into cut intervals.

    A segment starting no later than ``current.end + gap_threshold`` joins the
    current cut, whose end becomes that segment's end time. The end is
    overwritten, not maximized.
    """
    cuts: list[CutInterval] = []
    current: CutInterval | None = None

    for seg in segments:
        if current is None:
            current = CutInterval(start=seg.start_time, end=seg.end_time)
        elif seg.start_time <= current.end + gap_threshold:
            current.end = seg.end_time
        else:
            cuts.append(current)
            current = CutInterval(start=seg.start_time, end=seg.end_time)

    if current is not None:
        cuts.append(current)
    return cuts


def summarize(segments: Sequence[SentimentSegment]) -> Summary:
    """Count segments per sentiment class. Unknown labels are ignored."""
    return Summary(
        total_positive=sum(1 for s in segments if s.sentiment == POSITIVE),
        total_negative=sum(1 for s in segments if s.sentiment == NEGATIVE),
        total_neutral=sum(1 for s in segments if s.sentiment == NEUTRAL),
    )


def analyze(
    segments: Sequence[SentimentSegment],
    criterion: str,
    gap_threshold: float = DEFAULT_GAP_THRESHOLD,
) -> AnalysisResult:
    """Filter, merge and summarize one analysis result.

    The returned ``segments`` and ``summary`` always describe the full input;
    only ``cut_points`` depend on *criterion*.
    """
    filtered = filter_segments(segments, criterion)
    return AnalysisResult(
        segments=list(segments),
        cut_points=merge_into_cuts(filtered, gap_threshold),
        summary=summarize(segments),
    )
