"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from sentcut.models import SentimentSegment

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def seg(start: float, end: float, sentiment: str, score: float = 0.5) -> SentimentSegment:
    return SentimentSegment(start_time=start, end_time=end, sentiment=sentiment, score=score)


@pytest.fixture
def sample_request_path() -> Path:
    return FIXTURES_DIR / "sample_request.json"


@pytest.fixture
def workflow_body() -> dict:
    return json.loads((FIXTURES_DIR / "workflow_response.json").read_text())


@pytest.fixture
def four_segments() -> list[SentimentSegment]:
    return [
        seg(0, 15, "positive"),
        seg(15, 30, "neutral"),
        seg(30, 45, "negative"),
        seg(45, 60, "positive"),
    ]
