"""Read GitLab connection settings and the current branch from a git repository."""

from __future__ import annotations

import configparser
import logging
from pathlib import Path

from gl_ci_status.errors import ConfigIncomplete, ConfigMissing, DetachedHead, NotARepository
from gl_ci_status.models import CONFIG_KEYS, CONFIG_SECTION, GitLabConfig

HEAD_REF_PREFIX = "ref: refs/heads/"

logger = logging.getLogger("gl-ci-status")


def find_git_dir(start: Path) -> Path:
    """
    Locate the git directory for the repository enclosing ``start``.

    Follows ``.git`` files (``gitdir: <path>``) as written for worktrees and submodules.
    """
    start = Path(start).resolve()
    for directory in (start, *start.parents):
        dot_git = directory / ".git"
        if dot_git.is_dir():
            return dot_git
        if dot_git.is_file():
            return _follow_gitdir_file(dot_git)
    raise NotARepository(f"no .git found in {start} or any parent directory")


def _read_git_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        raise NotARepository(f"{path} does not exist") from None
    except (OSError, UnicodeDecodeError) as e:
        raise NotARepository(f"could not read {path}: {e}") from e


def _follow_gitdir_file(dot_git: Path) -> Path:
    content = _read_git_file(dot_git)
    if not content.startswith("gitdir:"):
        raise NotARepository(f"{dot_git} is not a valid gitdir file")
    target = Path(content[len("gitdir:") :].strip())
    if not target.is_absolute():
        target = dot_git.parent / target
    if not target.is_dir():
        raise NotARepository(f"{dot_git} points to missing directory {target}")
    return target.resolve()


def config_path(git_dir: Path) -> Path:
    """Path of the repository config, shared by all worktrees."""
    commondir = git_dir / "commondir"
    if commondir.is_file():
        common = Path(_read_git_file(commondir))
        if not common.is_absolute():
            common = git_dir / common
        return common.resolve() / "config"
    return git_dir / "config"


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    return value.strip()


def parse_gitlab_section(path: Path) -> GitLabConfig:
    """Parse the [gitlab] section of a git config file."""
    if not path.is_file():
        raise ConfigMissing(f"{path} does not exist")

    parser = configparser.ConfigParser(
        strict=False,
        interpolation=None,
        allow_no_value=True,
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=("#", ";"),
    )
    try:
        with open(path, encoding="utf-8") as f:
            # git has no indent-based continuation lines, configparser does
            parser.read_string("\n".join(line.strip() for line in f), source=str(path))
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        raise ConfigMissing(f"could not read {path}: {e}") from e

    # git section names are case-insensitive, configparser's are not
    section = next((s for s in parser.sections() if s.lower() == CONFIG_SECTION), None)
    if section is None:
        raise ConfigMissing(f"no [{CONFIG_SECTION}] section in {path}")

    values = {key: _unquote(parser.get(section, key, fallback=None) or "") for key in CONFIG_KEYS}
    missing = [key for key in CONFIG_KEYS if not values[key]]
    if missing:
        raise ConfigIncomplete(missing)

    logger.debug(f"Loaded GitLab config from {path}: server={values['server']} project={values['project-name']}")
    return GitLabConfig(
        server=values["server"],
        token=values["access-token"],
        project=values["project-name"],
    )


def load_config(git_dir: Path) -> GitLabConfig:
    return parse_gitlab_section(config_path(git_dir))


def current_branch(git_dir: Path) -> str:
    """Resolve the checked-out branch name from the symbolic HEAD reference."""
    head = git_dir / "HEAD"
    content = _read_git_file(head)
    if not content.startswith(HEAD_REF_PREFIX):
        raise DetachedHead(f"HEAD is at {content[:12] or 'nothing'}, not on a branch")
    branch = content[len(HEAD_REF_PREFIX) :].strip()
    if not branch:
        raise DetachedHead("HEAD does not name a branch")
    return branch
