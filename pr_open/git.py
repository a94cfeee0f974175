"""Git inspection: repository check, remotes, and the current branch."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Remotes considered authoritative, most preferred first
REMOTE_PRIORITY = ("upstream", "github", "origin")


class GitError(Exception):
    """Raised when git cannot answer a question about the checkout."""


class NoRemotesError(GitError):
    """Raised when the repository has no remotes configured."""


@dataclass(frozen=True)
class Remote:
    name: str
    url: str


def run_git(args: list[str]) -> subprocess.CompletedProcess[str]:
    """Run a git command and return the result."""
    logger.info("$ git %s", " ".join(args))
    try:
        return subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise GitError("git executable not found") from e


def check_repository() -> None:
    """Ensure the working directory is inside a git repository."""
    result = run_git(["rev-parse", "--git-dir"])
    if result.returncode != 0:
        raise GitError("fatal: Not a git repository")


def list_remotes() -> list[Remote]:
    """Return the fetch remotes in the order git lists them.

    A remote listed twice keeps its first position and its last URL.
    """
    result = run_git(["remote", "-v"])
    if result.returncode != 0:
        raise GitError(f"Failed to list git remotes: {result.stderr.strip()}")

    urls: dict[str, str] = {}
    for line in result.stdout.splitlines():
        parts = line.split()
        if len(parts) >= 2 and line.rstrip().endswith("(fetch)"):
            urls[parts[0]] = parts[1]

    return [Remote(name=name, url=url) for name, url in urls.items()]


def select_main_remote(remotes: list[Remote], preferred: str | None = None) -> Remote:
    """Pick the remote that backs the repository on GitHub.

    With *preferred* set, that remote is required. Otherwise the first name in
    REMOTE_PRIORITY that is configured wins, falling back to the first remote
    listed.
    """
    if not remotes:
        raise NoRemotesError("no git remotes found")

    by_name = {remote.name: remote for remote in remotes}

    if preferred is not None:
        if preferred not in by_name:
            raise GitError(f"git remote '{preferred}' not found")
        return by_name[preferred]

    for name in REMOTE_PRIORITY:
        if name in by_name:
            return by_name[name]

    return next(iter(by_name.values()))


def current_branch() -> str:
    """Return the short name of the branch HEAD points at."""
    result = run_git(["symbolic-ref", "--short", "HEAD"])
    if result.returncode != 0:
        reason = result.stderr.strip() or f"git exited with status {result.returncode}"
        raise GitError(f"Failed to get current branch: {reason}")
    branch = result.stdout.strip()
    if not branch:
        raise GitError("Failed to get current branch: empty branch name")
    return branch
