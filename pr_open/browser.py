"""Open a URL in the default browser without waiting for it."""

from __future__ import annotations

import logging
import subprocess
import sys
import threading

logger = logging.getLogger(__name__)


class BrowserLaunchError(Exception):
    """Raised when the platform opener cannot be started."""


def opener_command(url: str, platform: str | None = None) -> list[str]:
    """Return the command that opens *url* on *platform* (default: this host)."""
    if platform is None:
        platform = sys.platform

    if platform == "darwin":
        return ["open", url]
    if platform.startswith("linux"):
        return ["xdg-open", url]
    if platform in ("win32", "cygwin"):
        return ["rundll32", "url.dll,FileProtocolHandler", url]

    raise BrowserLaunchError(f"unsupported platform: {platform}")


class DetachedProcess:
    """A child process nobody waits on.

    The process is reaped by a daemon thread, so it never blocks interpreter
    exit and never lingers as a zombie while we are still running.
    """

    def __init__(self, process: subprocess.Popen) -> None:
        self.process = process
        self._reaper = threading.Thread(
            target=process.wait,
            name=f"reap-{process.pid}",
            daemon=True,
        )
        self._reaper.start()

    @classmethod
    def spawn(cls, command: list[str]) -> DetachedProcess:
        logger.info("$ %s", " ".join(command))
        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise BrowserLaunchError(f"failed to run {command[0]}: {e}") from e
        return cls(process)

    def wait(self, timeout: float | None = None) -> int | None:
        """Join the reaper and return the exit code, or None if still running."""
        self._reaper.join(timeout)
        return self.process.returncode


def open_url(url: str, platform: str | None = None) -> DetachedProcess:
    """Start the platform opener for *url* and return immediately."""
    return DetachedProcess.spawn(opener_command(url, platform))
