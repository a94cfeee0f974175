"""Build the pull request URL to open."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pr_open.github import GitHubError, PullRequest

logger = logging.getLogger(__name__)

WEB_URL = "https://github.com"

Lookup = Callable[[str, str], Optional[PullRequest]]


def pulls_url(identifier: str) -> str:
    return f"{WEB_URL}/{identifier}/pulls"


def new_pull_url(identifier: str, branch: str) -> str:
    # Branch is not URL-encoded
    return f"{WEB_URL}/{identifier}/pull/new/{branch}"


def resolve_url(
    identifier: str,
    branch: str | None,
    *,
    list_mode: bool,
    force_new: bool,
    lookup: Lookup,
) -> str:
    """Choose between the PR list, an existing PR, and the compose page.

    Lookup failures are not fatal; the compose page is used instead.
    """
    if list_mode:
        return pulls_url(identifier)

    if branch is None:
        raise ValueError("a branch is required unless list mode is requested")

    if force_new:
        return new_pull_url(identifier, branch)

    try:
        existing = lookup(identifier, branch)
    except GitHubError as e:
        logger.info("Warning: Failed to check existing PR: %s", e)
        return new_pull_url(identifier, branch)

    if existing is None:
        return new_pull_url(identifier, branch)

    logger.info("Found existing PR #%d", existing.number)
    return existing.url
