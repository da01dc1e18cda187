"""Web UI routes for SentCut."""

import logging

from flask import Blueprint, current_app, jsonify, render_template, request

from sentcut.config import CutConfig, MissingFieldError, WorkflowConfig, request_from_payload
from sentcut.engine import run_analysis
from sentcut.workflow import WorkflowResponseError, WorkflowUnavailableError

logger = logging.getLogger(__name__)

bp = Blueprint("web", __name__, template_folder="templates")


@bp.route("/")
def index():
    return render_template("index.html")


@bp.route("/health")
def health():
    return "OK", 200


@bp.route("/api/analyze", methods=["POST"])
def analyze_video():
    data = request.get_json(silent=True) or {}

    try:
        analysis_request = request_from_payload(
            data,
            workflow=WorkflowConfig(
                timeout=float(current_app.config["WEBHOOK_TIMEOUT"]),
                use_fallback=bool(current_app.config["USE_FALLBACK"]),
            ),
            cuts=CutConfig(gap_threshold=float(current_app.config["GAP_THRESHOLD"])),
        )
    except MissingFieldError as e:
        return jsonify({"error": str(e)}), 400

    try:
        result = run_analysis(analysis_request)
    except WorkflowUnavailableError as e:
        logger.error("Analysis failed: %s", e)
        return jsonify({"error": str(e)}), 502
    except WorkflowResponseError as e:
        logger.error("Analysis failed: %s", e)
        return jsonify({"error": str(e)}), 500

    return jsonify(result.to_dict())
