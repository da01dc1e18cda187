"""Thin CLI entry point — builds an AnalysisRequest and calls the engine."""

import argparse
import json
import logging
import sys
from pathlib import Path

from sentcut.config import (
    AnalysisRequest,
    CutConfig,
    MissingFieldError,
    WorkflowConfig,
    load_request,
)
from sentcut.engine import run_analysis
from sentcut.export import format_clock, write_timeline
from sentcut.models import CRITERIA
from sentcut.processor import DEFAULT_GAP_THRESHOLD
from sentcut.workflow import WorkflowResponseError, WorkflowUnavailableError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="sentcut",
        description="SentCut: cut points for videos from sentiment analysis.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    ana = sub.add_parser("analyze", help="Analyze a video and print cut points")
    ana.add_argument("video_url", nargs="?", help="URL of the video to analyze")
    ana.add_argument("--webhook", "-w", help="Analysis workflow webhook URL")
    ana.add_argument("--request", "-r", type=Path, help="Path to a JSON request file")
    ana.add_argument("--filter", "-f", choices=CRITERIA, default="positive", help="Sentiment to keep")
    ana.add_argument("--gap-threshold", type=float, default=DEFAULT_GAP_THRESHOLD, help="Max gap (seconds) merged into one cut")
    ana.add_argument("--timeout", type=float, default=60.0, help="Webhook timeout in seconds")
    ana.add_argument("--no-fallback", action="store_true", help="Fail instead of using demo segments")
    ana.add_argument("--json", action="store_true", help="Print the result as JSON")
    ana.add_argument("--timeline", type=Path, help="Write the sentiment timeline to an .srt or .vtt file")

    serve = sub.add_parser("serve", help="Launch the web UI")
    serve.add_argument("--port", type=int, default=8322, help="Port to listen on")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from sentcut.web import create_app
        app = create_app()
        print(f"SentCut web UI: http://{args.host}:{args.port}")
        app.run(host=args.host, port=args.port, debug=False)
        return

    try:
        if args.request:
            req = load_request(args.request)
        elif args.video_url and args.webhook:
            req = AnalysisRequest(
                video_url=args.video_url,
                webhook_url=args.webhook,
                sentiment_filter=args.filter,
                workflow=WorkflowConfig(timeout=args.timeout, use_fallback=not args.no_fallback),
                cuts=CutConfig(gap_threshold=args.gap_threshold),
            )
        else:
            print("Error: provide VIDEO_URL and --webhook, or --request.", file=sys.stderr)
            sys.exit(1)
    except MissingFieldError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    def on_progress(stage: str, frac: float) -> None:
        if not args.json:
            print(f"  [{frac:3.0%}] {stage}")

    try:
        result = run_analysis(req, on_progress=on_progress)
    except (WorkflowUnavailableError, WorkflowResponseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.timeline:
        fmt = "vtt" if args.timeline.suffix.lower() == ".vtt" else "srt"
        write_timeline(result.segments, args.timeline, fmt=fmt)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    s = result.summary
    print()
    print(f"Segments: {len(result.segments)}"
          f" (positive {s.total_positive}, negative {s.total_negative}, neutral {s.total_neutral})")
    if result.used_fallback:
        print("  Note: workflow unavailable, showing demo segments")
    if not result.cut_points:
        print(f"No {req.sentiment_filter} segments to keep.")
    for i, cut in enumerate(result.cut_points, 1):
        print(f"  Segment {i}: {format_clock(cut.start)} - {format_clock(cut.end)}"
              f"  (duration {format_clock(cut.duration)})")
    if args.timeline:
        print(f"  Timeline: {args.timeline}")
