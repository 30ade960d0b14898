"""Data models and constants for gitlab-ci-status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from gl_ci_status.errors import InvalidResponse

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

API_V4 = "/api/v4"
PER_PAGE = 100
DEFAULT_TIMEOUT = 15  # seconds

# Keys read from the [gitlab] section of .git/config
CONFIG_SECTION = "gitlab"
CONFIG_KEYS = ("server", "access-token", "project-name")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class StatusKind(Enum):
    SUCCESS = "success"
    FAILED = "failed"
    RUNNING = "running"
    PENDING = "pending"
    CANCELED = "canceled"
    SKIPPED = "skipped"
    CREATED = "created"
    MANUAL = "manual"
    OTHER = "other"

    @classmethod
    def parse(cls, text: str | None) -> StatusKind:
        """Map an API status string to a StatusKind, falling back to OTHER."""
        if not isinstance(text, str):
            return cls.OTHER
        try:
            return cls(text.strip().lower())
        except ValueError:
            return cls.OTHER


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GitLabConfig:
    """Connection settings read from the repository's git config."""

    server: str
    token: str
    project: str

    def __repr__(self) -> str:
        return f"GitLabConfig(server={self.server!r}, token='***', project={self.project!r})"


def _require(data: Any, fields: tuple[str, ...], what: str) -> None:
    if not isinstance(data, dict):
        raise InvalidResponse(f"expected a {what} object, got {type(data).__name__}")
    missing = [f for f in fields if data.get(f) is None]
    if missing:
        raise InvalidResponse(f"{what} object is missing {', '.join(missing)}")


@dataclass
class Pipeline:
    """Latest pipeline for a branch."""

    id: int
    status: StatusKind
    ref: str
    status_text: str = ""
    web_url: str = ""

    @classmethod
    def from_api(cls, data: dict, default_ref: str = "") -> Pipeline:
        _require(data, ("id", "status"), "pipeline")
        try:
            pipeline_id = int(data["id"])
        except (TypeError, ValueError):
            raise InvalidResponse(f"pipeline id is not an integer: {data['id']!r}") from None
        return cls(
            id=pipeline_id,
            status=StatusKind.parse(data["status"]),
            ref=data.get("ref") or default_ref,
            status_text=str(data["status"]),
            web_url=data.get("web_url") or "",
        )


@dataclass
class Job:
    """A single job of a pipeline."""

    name: str
    stage: str
    status: StatusKind
    status_text: str = ""

    @classmethod
    def from_api(cls, data: dict) -> Job:
        _require(data, ("name", "stage", "status"), "job")
        return cls(
            name=str(data["name"]),
            stage=str(data["stage"]),
            status=StatusKind.parse(data["status"]),
            status_text=str(data["status"]),
        )
