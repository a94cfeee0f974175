from __future__ import annotations

import pytest

from pr_open.remote import (
    NotGitHubURLError,
    extract_identifier,
    split_identifier,
    strip_git_suffix,
)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("git@github.com:foo/bar.git", "foo/bar"),
        ("git@github.com:foo/bar", "foo/bar"),
        ("https://github.com/foo/bar", "foo/bar"),
        ("https://github.com/foo/bar.git", "foo/bar"),
        ("https://github.com/foo/bar.git\n", "foo/bar"),
        ("git@github.com:foo/bar.js.git", "foo/bar.js"),
    ],
)
def test_extract_identifier(url: str, expected: str) -> None:
    assert extract_identifier(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "https://gitlab.com/foo/bar",
        "git@bitbucket.org:foo/bar.git",
        "http://github.com/foo/bar",
        "https://github.com/foo",
        "https://github.com/foo/bar/baz",
        "/srv/git/bar.git",
    ],
)
def test_extract_identifier_rejects(url: str) -> None:
    with pytest.raises(NotGitHubURLError, match="not a GitHub repository URL"):
        extract_identifier(url)


@pytest.mark.parametrize(
    "url",
    ["git@github.com:foo/bar.git", "https://github.com/foo/bar.git.git", "https://github.com/foo/bar"],
)
def test_strip_git_suffix_is_idempotent(url: str) -> None:
    once = strip_git_suffix(url)
    assert strip_git_suffix(once) == once
    assert extract_identifier(once) == extract_identifier(url)


def test_extract_identifier_never_keeps_git_suffix() -> None:
    assert extract_identifier("https://github.com/foo/bar.git.git") == "foo/bar"


def test_split_identifier() -> None:
    assert split_identifier("foo/bar") == ("foo", "bar")


@pytest.mark.parametrize("identifier", ["foo", "foo/bar/baz", "/bar", "foo/"])
def test_split_identifier_rejects(identifier: str) -> None:
    with pytest.raises(ValueError):
        split_identifier(identifier)
