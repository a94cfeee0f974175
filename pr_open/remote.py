"""Turn a git remote URL into a GitHub ``owner/repo`` identifier."""

from __future__ import annotations

import re

_SSH_PATTERN = re.compile(r"^git@github\.com:([^/]+/[^/]+)$")
_HTTPS_PATTERN = re.compile(r"^https://github\.com/([^/]+/[^/]+)$")


class NotGitHubURLError(ValueError):
    """Raised when a remote URL does not point at a GitHub repository."""


def strip_git_suffix(url: str) -> str:
    """Remove every trailing ``.git`` from *url*."""
    while url.endswith(".git"):
        url = url[: -len(".git")]
    return url


def extract_identifier(remote_url: str) -> str:
    """Return ``owner/repo`` for an SSH or HTTPS GitHub remote URL.

    Examples:
        git@github.com:foo/bar.git -> foo/bar
        https://github.com/foo/bar -> foo/bar
    """
    url = strip_git_suffix(remote_url.strip())

    for pattern in (_SSH_PATTERN, _HTTPS_PATTERN):
        match = pattern.match(url)
        if match:
            return match.group(1)

    raise NotGitHubURLError(f"not a GitHub repository URL: {remote_url}")


def split_identifier(identifier: str) -> tuple[str, str]:
    """Split ``owner/repo`` into its two parts."""
    parts = identifier.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"invalid repository identifier: {identifier!r}")
    return parts[0], parts[1]
