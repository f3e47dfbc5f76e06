"""Parsing options and their environment-driven defaults.

The library never reads the environment on its own: callers pass ``Options``
(or a shorthand accepted by ``Options.coerce``). ``Options.from_env`` exists for
the command line, which resolves its defaults from:

- ``NPM_SEMVER_LOOSE``
- ``NPM_SEMVER_INCLUDE_PRERELEASE``
- ``NPM_SEMVER_DEBUG`` (see ``debug_enabled``)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

LOOSE_ENV_VAR = "NPM_SEMVER_LOOSE"
INCLUDE_PRERELEASE_ENV_VAR = "NPM_SEMVER_INCLUDE_PRERELEASE"
DEBUG_ENV_VAR = "NPM_SEMVER_DEBUG"

_TRUTHY = {"1", "true", "yes", "y"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass(slots=True, frozen=True)
class Options:
    """Dialect and evaluation switches shared by every entry point."""

    loose: bool = False
    include_prerelease: bool = False

    @classmethod
    def coerce(cls, value: OptionsLike) -> Options:
        """Normalise ``None``, a bool (``loose``), a mapping or ``Options``."""
        if value is None:
            return _DEFAULT
        if isinstance(value, Options):
            return value
        if isinstance(value, bool):
            return cls(loose=value)
        if isinstance(value, Mapping):
            include = value.get("include_prerelease", value.get("includePrerelease", False))
            return cls(loose=bool(value.get("loose", False)), include_prerelease=bool(include))
        raise TypeError(f"Unsupported options value: {value!r}")

    @classmethod
    def from_env(cls) -> Options:
        return cls(
            loose=_env_flag(LOOSE_ENV_VAR),
            include_prerelease=_env_flag(INCLUDE_PRERELEASE_ENV_VAR),
        )


_DEFAULT = Options()

OptionsLike = Union[Options, bool, Mapping[str, Any], None]


def debug_enabled() -> bool:
    """Return True when ``NPM_SEMVER_DEBUG`` asks for debug logging."""
    return _env_flag(DEBUG_ENV_VAR)
