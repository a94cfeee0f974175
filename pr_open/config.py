"""Run settings.

Priority: CLI options -> environment variables -> defaults
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from pr_open.output import ColorMode

_TRUTHY = {"1", "true", "yes", "on"}

ENV_MAPPING = {
    "PR_OPEN_COLOR": "color",
    "PR_OPEN_VERBOSE": "verbose",
    "PR_OPEN_NO_BROWSER": "print_only",
}


@dataclass(frozen=True)
class Settings:
    verbose: bool = False
    color: ColorMode = ColorMode.AUTO
    list_mode: bool = False
    force_new: bool = False
    remote: str | None = None
    print_only: bool = False


def load_env_vars(environ: Mapping[str, str] | None = None) -> dict[str, object]:
    """Read settings from the environment."""
    if environ is None:
        environ = os.environ

    result: dict[str, object] = {}
    for env_key, config_key in ENV_MAPPING.items():
        raw = environ.get(env_key, "").strip()
        if not raw:
            continue
        if config_key == "color":
            try:
                result["color"] = ColorMode(raw.lower())
            except ValueError as e:
                choices = ", ".join(mode.value for mode in ColorMode)
                raise ValueError(f"{env_key} must be one of {choices}, got {raw!r}") from e
        else:
            result[config_key] = raw.lower() in _TRUTHY
    return result


def build_settings(
    *,
    verbose: bool = False,
    color: ColorMode | None = None,
    list_mode: bool = False,
    force_new: bool = False,
    remote: str | None = None,
    print_only: bool = False,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Merge CLI values over environment values over defaults.

    Boolean flags can only be switched on from the command line, so a flag
    counts as set when either source sets it.
    """
    env = load_env_vars(environ)
    return Settings(
        verbose=verbose or bool(env.get("verbose", False)),
        color=color if color is not None else env.get("color", ColorMode.AUTO),
        list_mode=list_mode,
        force_new=force_new,
        remote=remote,
        print_only=print_only or bool(env.get("print_only", False)),
    )
