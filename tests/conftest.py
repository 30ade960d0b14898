"""Shared test fixtures for gitlab-ci-status tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gl_ci_status.client import GitLabClient
from gl_ci_status.models import GitLabConfig

# Constants for use in tests - pytest makes conftest.py fixtures available,
# but these constants need to be imported directly from tests
MOCK_GITLAB_URL = "https://gitlab.example.com"
MOCK_API_URL = f"{MOCK_GITLAB_URL}/api/v4"

GITLAB_SECTION = """\
[gitlab]
    server = https://gitlab.example.com
    access-token = test-token
    project-name = myorg/my-project
"""

CORE_SECTION = """\
[core]
\trepositoryformatversion = 0
\tfilemode = true
\tbare = false
[remote "origin"]
\turl = git@gitlab.example.com:myorg/my-project.git
\tfetch = +refs/heads/*:refs/remotes/origin/*
"""


def make_repo(root: Path, config_text: str = CORE_SECTION + GITLAB_SECTION, head: str = "ref: refs/heads/main\n") -> Path:
    """Create a minimal .git directory under root and return the git dir."""
    git_dir = root / ".git"
    git_dir.mkdir(parents=True)
    (git_dir / "config").write_text(config_text)
    if head is not None:
        (git_dir / "HEAD").write_text(head)
    return git_dir


@pytest.fixture
def mock_config() -> GitLabConfig:
    """GitLabConfig pointing at mock server."""
    return GitLabConfig(server=MOCK_GITLAB_URL, token="test-token", project="myorg/my-project")


@pytest.fixture
def mock_client(mock_config):
    """GitLabClient pointing at mock server."""
    with GitLabClient.from_config(mock_config) as client:
        yield client


@pytest.fixture
def repo(tmp_path) -> Path:
    """A repository with a complete [gitlab] section, on branch main."""
    make_repo(tmp_path)
    return tmp_path


@pytest.fixture
def sample_pipeline() -> dict:
    """Sample pipeline API response item."""
    return {
        "id": 42,
        "iid": 12,
        "project_id": 123,
        "status": "success",
        "ref": "main",
        "sha": "a91957a858320c0e17f3a0eca7cfacbff50ea29a",
        "web_url": f"{MOCK_GITLAB_URL}/myorg/my-project/-/pipelines/42",
    }


@pytest.fixture
def sample_jobs() -> list:
    """Sample jobs API response."""
    return [
        {"id": 1, "name": "build", "stage": "build", "status": "success"},
        {"id": 2, "name": "unit-tests", "stage": "test", "status": "failed"},
        {"id": 3, "name": "deploy", "stage": "deploy", "status": "manual"},
    ]
