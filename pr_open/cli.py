"""Typer CLI entry point."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from pr_open import __version__, git
from pr_open.browser import BrowserLaunchError, open_url
from pr_open.config import Settings, build_settings
from pr_open.github import find_existing_pr
from pr_open.output import ColorMode, Styles, Terminal
from pr_open.remote import NotGitHubURLError, extract_identifier
from pr_open.urls import resolve_url

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pr-open",
    help="Open the GitHub pull request page for the current branch.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pr-open {__version__}")
        raise typer.Exit()


def resolve_target(settings: Settings) -> str:
    """Work out which GitHub page to open for the current checkout.

    Raises:
        GitError: not a repository, no remotes, or no readable branch
        NotGitHubURLError: the chosen remote is not hosted on GitHub
    """
    git.check_repository()
    remote = git.select_main_remote(git.list_remotes(), settings.remote)

    try:
        identifier = extract_identifier(remote.url)
    except NotGitHubURLError as e:
        raise NotGitHubURLError(f"Failed to extract GitHub repository URL: {e}") from e

    # The PR list never needs the branch
    branch = None if settings.list_mode else git.current_branch()

    return resolve_url(
        identifier,
        branch,
        list_mode=settings.list_mode,
        force_new=settings.force_new,
        lookup=find_existing_pr,
    )


@app.command()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Print each external command before running it"),
    ] = False,
    color: Annotated[
        ColorMode | None,
        typer.Option(
            "--color",
            case_sensitive=False,
            help="Colorize output: always, never or auto (default: auto)",
        ),
    ] = None,
    list_mode: Annotated[
        bool,
        typer.Option("--list", help="Open the pull requests list instead of a single PR"),
    ] = False,
    force_new: Annotated[
        bool,
        typer.Option("--force-new", help="Open the new PR page even if a PR already exists"),
    ] = False,
    remote: Annotated[
        str | None,
        typer.Option("--remote", help="Git remote to use instead of upstream/github/origin"),
    ] = None,
    print_only: Annotated[
        bool,
        typer.Option("--print", help="Print the URL without opening a browser"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = False,
) -> None:
    """Print the pull request URL for the current branch and open it in a browser."""
    try:
        settings = build_settings(
            verbose=verbose,
            color=color,
            list_mode=list_mode,
            force_new=force_new,
            remote=remote,
            print_only=print_only,
        )
    except ValueError as e:
        terminal = Terminal.create(Styles.from_mode(color or ColorMode.AUTO))
        terminal.print_error(f"Configuration error: {e}")
        raise typer.Exit(1) from e

    terminal = Terminal.create(Styles.from_mode(settings.color))
    terminal.configure_logging(settings.verbose)

    try:
        url = resolve_target(settings)
    except (git.GitError, NotGitHubURLError) as e:
        terminal.print_error(str(e))
        raise typer.Exit(1) from e

    terminal.print_url(url)

    if settings.print_only:
        return

    try:
        open_url(url)
    except BrowserLaunchError as e:
        logger.warning("Failed to open browser: %s", e)


if __name__ == "__main__":
    app()
