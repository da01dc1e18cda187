"""Demo segments served when the analysis workflow cannot be reached."""

from sentcut.models import SentimentSegment

FALLBACK_SEGMENTS: tuple[dict, ...] = (
    {
        "startTime": 0,
        "endTime": 15,
        "sentiment": "positive",
        "score": 0.85,
        "text": "Welcome to this amazing tutorial! Today we will explore something exciting.",
    },
    {
        "startTime": 15,
        "endTime": 30,
        "sentiment": "neutral",
        "score": 0.55,
        "text": "First, let me explain the basic concepts that we need to understand.",
    },
    {
        "startTime": 30,
        "endTime": 45,
        "sentiment": "negative",
        "score": 0.75,
        "text": "This part can be quite challenging and frustrating for beginners.",
    },
    {
        "startTime": 45,
        "endTime": 60,
        "sentiment": "positive",
        "score": 0.92,
        "text": "But once you get it, it feels absolutely fantastic and rewarding!",
    },
    {
        "startTime": 60,
        "endTime": 75,
        "sentiment": "neutral",
        "score": 0.50,
        "text": "Now let us move on to the next section of our discussion.",
    },
    {
        "startTime": 75,
        "endTime": 90,
        "sentiment": "positive",
        "score": 0.88,
        "text": "This feature is incredible and will save you so much time!",
    },
    {
        "startTime": 90,
        "endTime": 105,
        "sentiment": "negative",
        "score": 0.70,
        "text": "Unfortunately, there are some limitations and drawbacks to consider.",
    },
    {
        "startTime": 105,
        "endTime": 120,
        "sentiment": "positive",
        "score": 0.95,
        "text": "Thank you so much for watching! I hope you found this helpful and enjoyable.",
    },
)


def fallback_segments() -> list[SentimentSegment]:
    return [SentimentSegment.from_dict(d) for d in FALLBACK_SEGMENTS]
