"""Public entry points over the version and range models.

Functions here fall in two tiers:

- lenient (``parse``, ``valid``, ``clean``, ``coerce``, ``satisfies``, ``inc``,
  ``prerelease``, ``valid_range``, ``max_satisfying``, ``min_satisfying``)
  never raise and report failure as ``None``/``False``;
- strict (``major``, ``minor``, ``patch``) raise ``InvalidVersion``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from .errors import SemverError
from .grammar import COERCE_RE
from .models.range import Range
from .models.version import Identifier, Version
from .options import Options, OptionsLike

logger = logging.getLogger(__name__)

_CLEAN_PREFIX_RE = re.compile(r"^[=v]+")


def parse(version: Any, options: OptionsLike = None) -> Version | None:
    """Return the parsed ``Version``, or ``None`` if ``version`` is not valid."""
    try:
        return Version.parse(version, options)
    except SemverError as exc:
        logger.debug("parse failed: %s", exc)
        return None


def valid(version: Any, options: OptionsLike = None) -> str | None:
    """Return the canonical version string, or ``None``."""
    parsed = parse(version, options)
    return parsed.version if parsed else None


def clean(version: Any, options: OptionsLike = None) -> str | None:
    """Strip surrounding whitespace and a leading ``=``/``v`` run.

    Relational operators and wildcards are not decoration, so ``>1.2.3`` and
    ``1.2.x`` clean to ``None``.
    """
    if not isinstance(version, str):
        return None
    return valid(_CLEAN_PREFIX_RE.sub("", version.strip()), options)


def coerce(version: Any) -> Version | None:
    """Extract the first plausible ``M[.m[.p]]`` run from arbitrary text.

    Missing components default to 0; components longer than
    ``MAX_SAFE_COMPONENT_LENGTH`` digits are never considered.
    """
    if isinstance(version, Version):
        return version
    if not isinstance(version, str):
        return None

    match = COERCE_RE.search(version)
    if match is None:
        return None
    major, minor, patch = (part or "0" for part in match.groups())
    return parse(f"{major}.{minor}.{patch}")


def satisfies(version: Any, range_: Range | str, options: OptionsLike = None) -> bool:
    """Return whether ``version`` falls inside ``range_``; never raises."""
    try:
        return Range.parse(range_, options).test(version)
    except SemverError as exc:
        logger.debug("satisfies(%r, %r) failed: %s", version, range_, exc)
        return False


def valid_range(range_: Any, options: OptionsLike = None) -> str | None:
    """Return the normalised range string, or ``None`` if it does not parse."""
    try:
        return Range.parse(range_, options).range or "*"
    except SemverError:
        return None


def _satisfying(
    versions: Iterable[Version | str], range_: Range | str, options: OptionsLike
) -> list[tuple[Version, Version | str]]:
    try:
        rng = Range.parse(range_, options)
    except SemverError:
        return []
    matches = []
    for candidate in versions:
        version = parse(candidate, rng.options)
        if version is not None and rng.test(version):
            matches.append((version, candidate))
    return matches


def max_satisfying(
    versions: Iterable[Version | str], range_: Range | str, options: OptionsLike = None
) -> Version | str | None:
    """Return the highest of ``versions`` inside ``range_``, or ``None``."""
    matches = _satisfying(versions, range_, options)
    if not matches:
        return None
    return max(matches, key=lambda pair: pair[0])[1]


def min_satisfying(
    versions: Iterable[Version | str], range_: Range | str, options: OptionsLike = None
) -> Version | str | None:
    """Return the lowest of ``versions`` inside ``range_``, or ``None``."""
    matches = _satisfying(versions, range_, options)
    if not matches:
        return None
    return min(matches, key=lambda pair: pair[0])[1]


def inc(
    version: Version | str,
    release: str,
    options: OptionsLike | str = None,
    identifier: str | None = None,
) -> str | None:
    """Return the incremented canonical version, or ``None`` on any failure.

    A string passed as ``options`` is taken as the prerelease identifier.
    """
    if isinstance(options, str):
        identifier, options = options, None
    try:
        opts = Options.coerce(options)
        base = version.version if isinstance(version, Version) else version
        return Version.parse(base, opts).increment(release, identifier).version
    except SemverError as exc:
        logger.debug("inc(%r, %r) failed: %s", version, release, exc)
        return None


def major(version: Version | str, options: OptionsLike = None) -> int:
    return Version.parse(version, options).major


def minor(version: Version | str, options: OptionsLike = None) -> int:
    return Version.parse(version, options).minor


def patch(version: Version | str, options: OptionsLike = None) -> int:
    return Version.parse(version, options).patch


def prerelease(version: Any, options: OptionsLike = None) -> list[Identifier] | None:
    """Return the prerelease identifiers, or ``None`` when absent or invalid."""
    parsed = parse(version, options)
    if parsed is None or not parsed.prerelease:
        return None
    return list(parsed.prerelease)
