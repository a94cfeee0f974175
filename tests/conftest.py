from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ("PR_OPEN_COLOR", "PR_OPEN_VERBOSE", "PR_OPEN_NO_BROWSER", "GH_TOKEN", "GITHUB_TOKEN"):
        monkeypatch.delenv(name, raising=False)
