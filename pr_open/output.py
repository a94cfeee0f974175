"""Terminal output: color mode, styles, and the stderr log handler."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from rich.console import Console


class ColorMode(str, Enum):
    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"


def _isatty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True)
class Styles:
    """Coloring decisions, made once per run from the color mode."""

    stdout_color: bool
    stderr_color: bool
    url: str = "bold green"
    log: str = "magenta"
    error: str = "bold red"

    @classmethod
    def from_mode(
        cls,
        mode: ColorMode,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> Styles:
        if mode is ColorMode.ALWAYS:
            return cls(stdout_color=True, stderr_color=True)
        if mode is ColorMode.NEVER:
            return cls(stdout_color=False, stderr_color=False)
        return cls(
            stdout_color=_isatty(stdout or sys.stdout),
            stderr_color=_isatty(stderr or sys.stderr),
        )


def make_console(color: bool, stderr: bool = False) -> Console:
    """Console that writes plain text unless *color* is set."""
    return Console(
        stderr=stderr,
        color_system="standard" if color else None,
        force_terminal=color,
        no_color=not color,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


class ConsoleHandler(logging.Handler):
    """Logging handler that prints records through a rich console."""

    def __init__(self, console: Console, style: str | None = None) -> None:
        super().__init__()
        self.console = console
        self.style = style

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.console.print(self.format(record), style=self.style, markup=False)
        except Exception:
            self.handleError(record)


@dataclass(frozen=True)
class Terminal:
    """The two output streams and how to style them."""

    styles: Styles
    out: Console
    err: Console

    @classmethod
    def create(cls, styles: Styles) -> Terminal:
        return cls(
            styles=styles,
            out=make_console(styles.stdout_color),
            err=make_console(styles.stderr_color, stderr=True),
        )

    def print_url(self, url: str) -> None:
        self.out.print(url, style=self.styles.url, markup=False)

    def print_error(self, message: str) -> None:
        self.err.print(message, style=self.styles.error, markup=False)

    def configure_logging(self, verbose: bool) -> None:
        """Route ``pr_open`` log records to stderr.

        INFO and up with *verbose*, WARNING and up otherwise.
        """
        pkg_logger = logging.getLogger("pr_open")
        for handler in list(pkg_logger.handlers):
            pkg_logger.removeHandler(handler)
        pkg_logger.addHandler(ConsoleHandler(self.err, self.styles.log))
        pkg_logger.setLevel(logging.INFO if verbose else logging.WARNING)
        pkg_logger.propagate = False
