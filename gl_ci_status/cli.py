"""CLI entry point for gitlab-ci-status."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from gl_ci_status.client import fetch_jobs, fetch_latest_pipeline
from gl_ci_status.errors import CiStatusError
from gl_ci_status.gitconfig import current_branch, find_git_dir, load_config
from gl_ci_status.logging_utils import setup_logging
from gl_ci_status.render import render_report


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="gitlab-ci-status",
        description="Show the latest GitLab CI pipeline and its jobs for the current branch.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Settings are read from the [gitlab] section of the repository's .git/config:

    [gitlab]
        server = https://gitlab.com
        access-token = <token>
        project-name = <namespace>/<project>

Set them with e.g.:
    git config gitlab.server https://gitlab.com
    git config gitlab.access-token glpat-xxxxxxxx
    git config gitlab.project-name myorg/myproject
""",
    )


def run(cwd: Path) -> None:
    """Look up and print the CI status of the branch checked out in ``cwd``."""
    git_dir = find_git_dir(cwd)
    config = load_config(git_dir)
    branch = current_branch(git_dir)

    pipeline = fetch_latest_pipeline(config, branch)
    jobs = fetch_jobs(config, pipeline.id)

    render_report(branch, pipeline, jobs)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    parser.parse_args(argv)

    logger = setup_logging()

    try:
        run(Path.cwd())
    except CiStatusError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
