"""
gitlab-ci-status: Show the latest GitLab CI pipeline for the current git branch.

Reads the GitLab server, access token and project from the [gitlab] section of the
repository's .git/config, looks up the branch's most recent pipeline and its jobs,
and prints a colorized summary.
"""

from gl_ci_status.cli import main

__version__ = "0.1.0"
__all__ = ["main", "__version__"]
