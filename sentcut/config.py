"""Analysis request schema — the contract between CLI/API and engine."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from sentcut.models import POSITIVE
from sentcut.processor import DEFAULT_GAP_THRESHOLD


class MissingFieldError(ValueError):
    """Raised when a request lacks the video URL or the webhook URL."""


@dataclass
class WorkflowConfig:
    """How to talk to the external analysis workflow."""

    timeout: float = 60.0
    use_fallback: bool = True


@dataclass
class CutConfig:
    """How filtered segments are merged into cut points."""

    gap_threshold: float = DEFAULT_GAP_THRESHOLD


@dataclass
class AnalysisRequest:
    """A single video to analyze and the filter to cut by."""

    video_url: str
    webhook_url: str
    sentiment_filter: str = POSITIVE
    workflow: WorkflowConfig = field(default_factory=WorkflowConfig)
    cuts: CutConfig = field(default_factory=CutConfig)


def request_from_payload(
    data: dict,
    workflow: WorkflowConfig | None = None,
    cuts: CutConfig | None = None,
) -> AnalysisRequest:
    """Build a request from the camelCase payload posted by the web UI.

    The webhook URL is accepted as either ``n8nWebhookUrl`` or ``webhookUrl``.
    """
    if not isinstance(data, dict):
        raise MissingFieldError("Missing required fields")

    video_url = data.get("videoUrl")
    webhook_url = data.get("n8nWebhookUrl") or data.get("webhookUrl")
    if not video_url or not webhook_url:
        raise MissingFieldError("Missing required fields")

    return AnalysisRequest(
        video_url=video_url,
        webhook_url=webhook_url,
        sentiment_filter=data.get("sentimentFilter") or POSITIVE,
        workflow=workflow or WorkflowConfig(),
        cuts=cuts or CutConfig(),
    )


def load_request(path: str | Path) -> AnalysisRequest:
    """Load and validate an analysis request from a JSON file."""
    path = Path(path)
    data = json.loads(path.read_text())

    if not isinstance(data, dict):
        raise ValueError("Request file must contain a JSON object")

    try:
        workflow = WorkflowConfig(**data["workflow"]) if "workflow" in data else WorkflowConfig()
        cuts = CutConfig(**data["cuts"]) if "cuts" in data else CutConfig()
    except TypeError as e:
        raise ValueError(f"Invalid 'workflow' or 'cuts' section: {e}") from e

    return request_from_payload(data, workflow=workflow, cuts=cuts)
