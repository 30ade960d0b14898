"""Colorized console output for pipeline and job status."""

from __future__ import annotations

import sys
from typing import TextIO

from gl_ci_status.models import Job, Pipeline, StatusKind

RESET = "\033[0m"
BOLD = "\033[1m"
GREEN = "\033[92m"
RED = "\033[91m"
YELLOW = "\033[93m"
BLUE = "\033[94m"
WHITE = "\033[97m"
CYAN = "\033[96m"

BULLET = "●"

# label, color
STATUS_STYLES: dict[StatusKind, tuple[str, str]] = {
    StatusKind.SUCCESS: ("SUCCESS", GREEN),
    StatusKind.FAILED: ("FAILED", RED),
    StatusKind.RUNNING: ("BUILDING", YELLOW),
    StatusKind.PENDING: ("BUILDING", YELLOW),
    StatusKind.CANCELED: ("CANCELED", WHITE),
    StatusKind.SKIPPED: ("SKIPPED", BLUE),
}

NEUTRAL = WHITE


def status_style(kind: StatusKind, text: str = "") -> tuple[str, str]:
    """Return the (label, color) pair for a status; unknown statuses show their own name."""
    if kind in STATUS_STYLES:
        return STATUS_STYLES[kind]
    label = (text or kind.value).upper()
    return label, NEUTRAL


def colorize(text: str, color: str, bold: bool = False, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{BOLD if bold else ''}{color}{text}{RESET}"


def format_status(kind: StatusKind, text: str = "", color: bool = True) -> str:
    label, code = status_style(kind, text)
    return colorize(f"{BULLET} {label}", code, bold=True, enabled=color)


def render_report(
    branch: str,
    pipeline: Pipeline,
    jobs: list[Job],
    stream: TextIO | None = None,
    color: bool = True,
) -> None:
    """Print the branch, its latest pipeline and that pipeline's jobs."""
    out = stream or sys.stdout
    print(f"Branch: {colorize(branch, CYAN, enabled=color)}", file=out)
    print(f"Pipeline ID: {pipeline.id}", file=out)
    print(f"Status: {format_status(pipeline.status, pipeline.status_text, color=color)}", file=out)
    if pipeline.web_url:
        print(f"URL: {pipeline.web_url}", file=out)

    if jobs:
        print("\nJobs:", file=out)
        for job in jobs:
            print(f"  {job.name} ({job.stage}) - {format_status(job.status, job.status_text, color=color)}", file=out)
