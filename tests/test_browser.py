from __future__ import annotations

import sys

import pytest

import pr_open.browser as browser
from pr_open.browser import BrowserLaunchError, DetachedProcess, open_url, opener_command

URL = "https://github.com/foo/bar/pulls"


@pytest.mark.parametrize(
    "platform, expected",
    [
        ("darwin", ["open", URL]),
        ("linux", ["xdg-open", URL]),
        ("win32", ["rundll32", "url.dll,FileProtocolHandler", URL]),
    ],
)
def test_opener_command(platform: str, expected: list[str]) -> None:
    assert opener_command(URL, platform) == expected


def test_opener_command_unsupported_platform() -> None:
    with pytest.raises(BrowserLaunchError, match="unsupported platform: sunos5"):
        opener_command(URL, "sunos5")


class FakePopen:
    def __init__(self, cmd, **kwargs) -> None:
        self.cmd = cmd
        self.kwargs = kwargs
        self.pid = 4242
        self.returncode = None
        self.waited = False

    def wait(self) -> int:
        self.waited = True
        self.returncode = 0
        return 0


def test_open_url_spawns_detached(monkeypatch) -> None:
    monkeypatch.setattr(browser.subprocess, "Popen", FakePopen)

    task = open_url(URL, "linux")

    assert task.process.cmd == ["xdg-open", URL]
    assert task.process.kwargs["stdout"] is browser.subprocess.DEVNULL
    assert task.process.kwargs["stderr"] is browser.subprocess.DEVNULL
    assert task.wait(timeout=5) == 0
    assert task.process.waited


def test_spawn_failure(monkeypatch) -> None:
    def fake_popen(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(browser.subprocess, "Popen", fake_popen)
    with pytest.raises(BrowserLaunchError, match="xdg-open"):
        open_url(URL, "linux")


def test_detached_process_is_reaped() -> None:
    task = DetachedProcess.spawn([sys.executable, "-c", "raise SystemExit(3)"])
    assert task.wait(timeout=30) == 3
