"""Orchestrator — runs one analysis request end to end."""

from typing import Callable

from sentcut.config import AnalysisRequest
from sentcut.models import AnalysisResult
from sentcut.processor import analyze
from sentcut.workflow import fetch_segments


def run_analysis(
    request: AnalysisRequest,
    on_progress: Callable[[str, float], None] | None = None,
) -> AnalysisResult:
    """Fetch segments for the request's video and derive cut points.

    Args:
        request: Validated analysis request.
        on_progress: Optional callback(stage_name, fraction_complete).
    """

    def _progress(stage: str, frac: float) -> None:
        if on_progress:
            on_progress(stage, frac)

    _progress("Requesting sentiment analysis", 0.0)
    segments, used_fallback = fetch_segments(
        request.video_url,
        request.webhook_url,
        request.sentiment_filter,
        request.workflow,
    )
    if used_fallback:
        _progress("Workflow unavailable, using demo segments", 0.7)

    _progress("Computing cut points", 0.8)
    result = analyze(
        segments,
        request.sentiment_filter,
        gap_threshold=request.cuts.gap_threshold,
    )
    result.used_fallback = used_fallback

    _progress("Done", 1.0)
    return result
