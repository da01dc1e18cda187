"""Tests for the engine module."""

from unittest.mock import patch

from sentcut.config import AnalysisRequest, CutConfig
from sentcut.engine import run_analysis
from sentcut.models import CutInterval


class TestRunAnalysis:
    @patch("sentcut.engine.fetch_segments")
    def test_filters_with_request_criterion(self, mock_fetch, four_segments):
        mock_fetch.return_value = (four_segments, False)
        req = AnalysisRequest(video_url="https://v", webhook_url="https://w", sentiment_filter="positive")

        result = run_analysis(req)

        assert result.cut_points == [CutInterval(start=0, end=15), CutInterval(start=45, end=60)]
        assert result.segments == four_segments
        assert result.used_fallback is False
        mock_fetch.assert_called_once_with("https://v", "https://w", "positive", req.workflow)

    @patch("sentcut.engine.fetch_segments")
    def test_uses_gap_threshold(self, mock_fetch, four_segments):
        mock_fetch.return_value = (four_segments, False)
        req = AnalysisRequest(
            video_url="https://v",
            webhook_url="https://w",
            sentiment_filter="positive",
            cuts=CutConfig(gap_threshold=30.0),
        )
        assert run_analysis(req).cut_points == [CutInterval(start=0, end=60)]

    @patch("sentcut.engine.fetch_segments")
    def test_reports_progress_and_fallback(self, mock_fetch, four_segments):
        mock_fetch.return_value = (four_segments, True)
        stages = []

        result = run_analysis(
            AnalysisRequest(video_url="https://v", webhook_url="https://w"),
            on_progress=lambda stage, frac: stages.append((stage, frac)),
        )

        assert result.used_fallback is True
        assert stages[0][1] == 0.0
        assert stages[-1] == ("Done", 1.0)
        assert any("demo segments" in s for s, _ in stages)
