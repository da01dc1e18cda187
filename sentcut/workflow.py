"""Client for the external sentiment-analysis workflow (e.g. an n8n webhook)."""

import logging

import requests

from sentcut.config import WorkflowConfig
from sentcut.fallback import fallback_segments
from sentcut.models import SentimentSegment

logger = logging.getLogger(__name__)

ACTION = "analyze_sentiment"


class WorkflowUnavailableError(RuntimeError):
    """Raised when the webhook fails and the demo fallback is disabled."""


class WorkflowResponseError(ValueError):
    """Raised when the webhook answers with segments of the wrong shape."""


def parse_segments(body: object) -> list[SentimentSegment]:
    """Turn a workflow response body into segments.

    The body is either the segment array itself or an object carrying it under
    ``segments``. An object without that key means the workflow found nothing.
    """
    if isinstance(body, list):
        raw = body
    elif isinstance(body, dict):
        raw = body.get("segments") or []
    else:
        raise WorkflowResponseError("Workflow response must be a JSON array or object")

    if not isinstance(raw, list):
        raise WorkflowResponseError("'segments' must be a list")

    try:
        return [SentimentSegment.from_dict(item) for item in raw]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise WorkflowResponseError(f"Malformed segment in workflow response: {e}") from e


def fetch_segments(
    video_url: str,
    webhook_url: str,
    sentiment_filter: str,
    config: WorkflowConfig | None = None,
) -> tuple[list[SentimentSegment], bool]:
    """POST the video to the workflow and return ``(segments, used_fallback)``.

    Any transport error, non-2xx status or non-JSON body is logged and
    replaced with the demo segments, unless ``config.use_fallback`` is off.
    """
    config = config or WorkflowConfig()
    payload = {
        "videoUrl": video_url,
        "sentimentFilter": sentiment_filter,
        "action": ACTION,
    }

    logger.info("Requesting sentiment analysis for %s", video_url)
    try:
        resp = requests.post(webhook_url, json=payload, timeout=config.timeout)
        resp.raise_for_status()
        body = resp.json()
    except requests.RequestException as e:
        if not config.use_fallback:
            raise WorkflowUnavailableError(f"Workflow request failed: {e}") from e
        logger.warning("Workflow webhook failed, using demo segments: %s", e)
        return fallback_segments(), True

    segments = parse_segments(body)
    logger.debug("Workflow returned %d segments", len(segments))
    return segments, False
