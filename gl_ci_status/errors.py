"""Exceptions raised while looking up a branch's CI status."""

from __future__ import annotations


class CiStatusError(Exception):
    """Base class for every failure that aborts a run."""

    category = "Error"

    def __init__(self, detail: str = ""):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.category}: {self.detail}" if self.detail else self.category


# -- Repository / configuration --


class NotARepository(CiStatusError):
    category = "Not a git repository"


class ConfigMissing(CiStatusError):
    category = "GitLab configuration missing"


class ConfigIncomplete(CiStatusError):
    category = "GitLab configuration incomplete"

    def __init__(self, missing_keys: list[str]):
        self.missing_keys = list(missing_keys)
        super().__init__(", ".join(f"gitlab.{k}" for k in self.missing_keys) + " not set in .git/config")


class DetachedHead(CiStatusError):
    category = "Detached HEAD"


# -- GitLab API --


class NetworkError(CiStatusError):
    category = "Network error"


class AuthenticationError(CiStatusError):
    category = "Authentication failed"

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}, check gitlab.access-token")


class ProjectNotFound(CiStatusError):
    category = "Project not found"

    def __init__(self, project: str):
        self.project = project
        super().__init__(project)


class NoPipelineFound(CiStatusError):
    category = "No pipeline found"

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"no pipelines for branch '{branch}'")


class ApiError(CiStatusError):
    category = "GitLab API error"

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        detail = f"HTTP {status_code}"
        if body:
            detail += f": {body[:500]}"
        super().__init__(detail)


class InvalidResponse(CiStatusError):
    category = "Invalid API response"
