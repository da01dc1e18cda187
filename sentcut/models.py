"""Shared data types used across SentCut."""

from dataclasses import dataclass, field

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"
ALL = "all"

SENTIMENTS = (POSITIVE, NEGATIVE, NEUTRAL)
CRITERIA = SENTIMENTS + (ALL,)


@dataclass(frozen=True)
class SentimentSegment:
    """A span of the source video with an assigned sentiment label."""

    start_time: float
    end_time: float
    sentiment: str
    score: float = 0.0
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "SentimentSegment":
        """Build a segment from the workflow's camelCase wire shape."""
        return cls(
            start_time=float(data["startTime"]),
            end_time=float(data["endTime"]),
            sentiment=str(data["sentiment"]),
            score=float(data.get("score", 0.0)),
            text=data.get("text") or "",
        )

    def to_dict(self) -> dict:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "sentiment": self.sentiment,
            "score": self.score,
            "text": self.text,
        }


@dataclass
class CutInterval:
    """A start/end time pair in seconds, produced by merging segments."""

    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}


@dataclass
class Summary:
    """Segment counts per sentiment class."""

    total_positive: int = 0
    total_negative: int = 0
    total_neutral: int = 0

    def to_dict(self) -> dict:
        return {
            "totalPositive": self.total_positive,
            "totalNegative": self.total_negative,
            "totalNeutral": self.total_neutral,
        }


@dataclass
class AnalysisResult:
    """Everything returned for one analysis request."""

    segments: list[SentimentSegment]
    cut_points: list[CutInterval] = field(default_factory=list)
    summary: Summary = field(default_factory=Summary)
    used_fallback: bool = False

    def to_dict(self) -> dict:
        return {
            "segments": [s.to_dict() for s in self.segments],
            "cutPoints": [c.to_dict() for c in self.cut_points],
            "summary": self.summary.to_dict(),
        }
