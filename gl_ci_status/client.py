"""GitLab API client for pipeline and job lookups."""

from __future__ import annotations

import logging
import urllib.parse
from typing import Any

import requests

from gl_ci_status.errors import (
    ApiError,
    AuthenticationError,
    InvalidResponse,
    NetworkError,
    NoPipelineFound,
    ProjectNotFound,
)
from gl_ci_status.models import API_V4, DEFAULT_TIMEOUT, PER_PAGE, GitLabConfig, Job, Pipeline


class GitLabClient:
    """Thin wrapper around GitLab REST API v4 scoped to a single project."""

    def __init__(self, base_url: str, token: str, project: str, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}{API_V4}"
        self.project = project
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"PRIVATE-TOKEN": token})
        self.logger = logging.getLogger("gl-ci-status")

    @classmethod
    def from_config(cls, config: GitLabConfig, timeout: float = DEFAULT_TIMEOUT) -> GitLabClient:
        return cls(config.server, config.token, config.project, timeout=timeout)

    def __enter__(self) -> GitLabClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    @property
    def project_endpoint(self) -> str:
        return f"/projects/{urllib.parse.quote(self.project, safe='')}"

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Make a single HTTP request and translate failures into CiStatusError."""
        url = f"{self.api_url}{endpoint}"
        self.logger.debug(f"{method.upper()} {url} {kwargs.get('params') or ''}")
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"request to {self.base_url} timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"could not reach {self.base_url}: {e}") from e

        if resp.status_code in (401, 403):
            raise AuthenticationError(resp.status_code)
        if resp.status_code == 404:
            raise ProjectNotFound(self.project)
        if resp.status_code >= 400:
            self.logger.debug(f"API error {resp.status_code}: {resp.text[:500]}")
            raise ApiError(resp.status_code, resp.text)
        return resp

    def get_list(self, endpoint: str, params: dict | None = None) -> list[Any]:
        """GET an endpoint that returns a JSON array (first page only)."""
        resp = self._request("GET", endpoint, params=params)
        try:
            data = resp.json()
        except ValueError as e:
            raise InvalidResponse(f"{endpoint} did not return JSON") from e
        if not isinstance(data, list):
            raise InvalidResponse(f"{endpoint} returned {type(data).__name__}, expected a list")
        return data

    def get_latest_pipeline(self, branch: str) -> Pipeline:
        """Most recent pipeline for a branch; GitLab lists newest first."""
        pipelines = self.get_list(f"{self.project_endpoint}/pipelines", params={"ref": branch})
        if not pipelines:
            raise NoPipelineFound(branch)
        return Pipeline.from_api(pipelines[0], default_ref=branch)

    def get_pipeline_jobs(self, pipeline_id: int) -> list[Job]:
        """Jobs of a pipeline in API order. An empty list is valid."""
        jobs = self.get_list(
            f"{self.project_endpoint}/pipelines/{pipeline_id}/jobs",
            params={"per_page": PER_PAGE},
        )
        return [Job.from_api(job) for job in jobs]


def fetch_latest_pipeline(config: GitLabConfig, branch: str, timeout: float = DEFAULT_TIMEOUT) -> Pipeline:
    with GitLabClient.from_config(config, timeout=timeout) as client:
        return client.get_latest_pipeline(branch)


def fetch_jobs(config: GitLabConfig, pipeline_id: int, timeout: float = DEFAULT_TIMEOUT) -> list[Job]:
    with GitLabClient.from_config(config, timeout=timeout) as client:
        return client.get_pipeline_jobs(pipeline_id)
