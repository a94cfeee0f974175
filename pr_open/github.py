"""GitHub REST lookup of an open pull request for a branch."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Any

import httpx

from pr_open.remote import split_identifier

logger = logging.getLogger(__name__)

API_URL = "https://api.github.com"
API_ACCEPT = "application/vnd.github.v3+json"
REQUEST_TIMEOUT = 10.0
TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")


class GitHubError(Exception):
    """Base class for failures talking to GitHub."""


class AuthTokenError(GitHubError):
    """Raised when no GitHub token can be obtained."""


class PullRequestLookupError(GitHubError):
    """Raised when the pull request lookup cannot produce an answer."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class PullRequest:
    number: int
    url: str
    head_branch: str

    @classmethod
    def from_api(cls, data: Any) -> PullRequest:
        try:
            return cls(
                number=int(data["number"]),
                url=str(data["html_url"]),
                head_branch=str(data["head"]["ref"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise PullRequestLookupError(f"malformed pull request object: {e}") from e


def _check_token(token: str, source: str) -> str:
    # HTTP header values must be ASCII
    if not token.isascii():
        raise AuthTokenError(f"token from {source} contains non-ASCII characters")
    return token


def get_auth_token() -> str:
    """Return a GitHub token from the environment or ``gh auth token``."""
    for name in TOKEN_ENV_VARS:
        token = os.environ.get(name, "").strip()
        if token:
            logger.info("Using GitHub token from %s", name)
            return _check_token(token, name)

    logger.info("$ gh auth token")
    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise AuthTokenError("gh executable not found") from e

    if result.returncode != 0:
        raise AuthTokenError(f"gh auth token failed: {result.stderr.strip()}")
    token = result.stdout.strip()
    if not token:
        raise AuthTokenError("gh auth token returned an empty token")
    return _check_token(token, "gh auth token")


def find_existing_pr(
    identifier: str,
    branch: str,
    *,
    token: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> PullRequest | None:
    """Return the first open pull request whose head is *branch*, if any.

    Raises:
        AuthTokenError: no token could be obtained
        PullRequestLookupError: the request failed or returned something unusable
    """
    try:
        owner, repo = split_identifier(identifier)
    except ValueError as e:
        raise PullRequestLookupError(str(e)) from e

    if token is None:
        token = get_auth_token()

    headers = {
        "Authorization": f"token {token}",
        "Accept": API_ACCEPT,
    }
    params = {"head": f"{owner}:{branch}", "state": "open"}

    try:
        with httpx.Client(
            base_url=API_URL,
            headers=headers,
            timeout=httpx.Timeout(REQUEST_TIMEOUT),
            transport=transport,
        ) as client:
            resp = client.get(f"/repos/{owner}/{repo}/pulls", params=params)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
        raise PullRequestLookupError(f"request failed: {e}") from e

    if resp.status_code != httpx.codes.OK:
        raise PullRequestLookupError(
            f"GitHub API returned status {resp.status_code}",
            status_code=resp.status_code,
        )

    try:
        pulls = resp.json()
    except ValueError as e:
        raise PullRequestLookupError(f"invalid JSON in response: {e}") from e

    if not isinstance(pulls, list):
        raise PullRequestLookupError("expected a JSON array of pull requests")
    if not pulls:
        return None
    return PullRequest.from_api(pulls[0])
