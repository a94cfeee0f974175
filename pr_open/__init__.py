"""Open the GitHub pull request page for the current branch."""

__version__ = "0.1.0"
