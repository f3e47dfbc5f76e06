"""Version value type and parser."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field, replace
from typing import Union

from ..errors import InvalidIncrement, InvalidVersion
from ..grammar import MAX_LENGTH, MAX_SAFE_INTEGER, NUMERIC_RE, dialect
from ..options import Options, OptionsLike

Identifier = Union[int, str]

RELEASE_TYPES = (
    "major",
    "premajor",
    "minor",
    "preminor",
    "patch",
    "prepatch",
    "prerelease",
)


def _numberify(identifier: str) -> Identifier:
    """Return ``identifier`` as an int when it is all digits and safely sized."""
    if NUMERIC_RE.fullmatch(identifier):
        num = int(identifier)
        if 0 <= num < MAX_SAFE_INTEGER:
            return num
    return identifier


def _component(value: str, name: str, raw: str) -> int:
    num = int(value)
    if num > MAX_SAFE_INTEGER or num < 0:
        raise InvalidVersion(f"Invalid {name} version: {raw!r}")
    return num


@functools.total_ordering
@dataclass(slots=True, frozen=True, eq=False)
class Version:
    """An immutable semantic version.

    ``build`` is kept for identification only: it takes no part in equality,
    ordering or hashing. ``loose`` and ``raw`` record how the value was parsed.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = ()
    build: tuple[str, ...] = ()
    loose: bool = False
    raw: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0 or value > MAX_SAFE_INTEGER:
                raise InvalidVersion(f"Invalid {name} version: {value!r}")
        if not self.raw:
            object.__setattr__(self, "raw", self.version)

    @classmethod
    def parse(cls, text: Version | str, options: OptionsLike = None) -> Version:
        """Parse ``text`` in the dialect selected by ``options``.

        An existing ``Version`` parsed with the same looseness is returned
        unchanged; otherwise it is re-parsed from its canonical string.

        Raises:
            InvalidVersion: for non-string input, input longer than
                ``MAX_LENGTH``, text that does not match the dialect, or a
                component above ``MAX_SAFE_INTEGER``.
        """
        opts = Options.coerce(options)
        if isinstance(text, Version):
            if text.loose == opts.loose:
                return text
            text = text.version
        elif not isinstance(text, str):
            raise InvalidVersion(f"Invalid Version: {text!r}")

        if len(text) > MAX_LENGTH:
            raise InvalidVersion(f"version is longer than {MAX_LENGTH} characters")

        match = dialect(opts.loose).full.fullmatch(text.strip())
        if match is None:
            raise InvalidVersion(f"Invalid Version: {text}")

        major, minor, patch, pre, build = match.groups()
        return cls(
            major=_component(major, "major", text),
            minor=_component(minor, "minor", text),
            patch=_component(patch, "patch", text),
            prerelease=tuple(_numberify(part) for part in pre.split(".")) if pre else (),
            build=tuple(build.split(".")) if build else (),
            loose=opts.loose,
            raw=text,
        )

    @property
    def version(self) -> str:
        """Canonical ``M.m.p[-pre]`` form; build metadata is not emitted."""
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(str(part) for part in self.prerelease)
        return text

    def format(self, include_build: bool = False) -> str:
        text = self.version
        if include_build and self.build:
            text += "+" + ".".join(self.build)
        return text

    def __str__(self) -> str:
        return self.version

    def compare(self, other: Version | str) -> int:
        from ..compare import compare_main, compare_pre

        if not isinstance(other, Version):
            other = Version.parse(other, self.loose)
        return compare_main(self, other) or compare_pre(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def increment(self, release: str, identifier: str | None = None) -> Version:
        """Return the next version for ``release``; build metadata is dropped.

        Raises:
            InvalidIncrement: when ``release`` is not a known release type.
        """
        major, minor, patch, pre = self.major, self.minor, self.patch, self.prerelease

        if release == "premajor":
            bumped = replace(self, major=major + 1, minor=0, patch=0, prerelease=(), build=(), raw="")
            return bumped._pre(identifier)
        if release == "preminor":
            bumped = replace(self, minor=minor + 1, patch=0, prerelease=(), build=(), raw="")
            return bumped._pre(identifier)
        if release == "prepatch":
            # Any existing prerelease is irrelevant: bump to the next patch first.
            cleared = replace(self, prerelease=(), build=(), raw="")
            return cleared.increment("patch")._pre(identifier)
        if release == "prerelease":
            base = self if pre else self.increment("patch")
            return base._pre(identifier)
        if release == "major":
            # 1.0.0-5 bumps to 1.0.0, 1.1.0 bumps to 2.0.0
            if minor != 0 or patch != 0 or not pre:
                major += 1
            return replace(self, major=major, minor=0, patch=0, prerelease=(), build=(), raw="")
        if release == "minor":
            # 1.2.0-5 bumps to 1.2.0, 1.2.1 bumps to 1.3.0
            if patch != 0 or not pre:
                minor += 1
            return replace(self, minor=minor, patch=0, prerelease=(), build=(), raw="")
        if release == "patch":
            # 1.2.0-5 patches to 1.2.0, 1.2.0 patches to 1.2.1
            if not pre:
                patch += 1
            return replace(self, patch=patch, prerelease=(), build=(), raw="")
        if release == "pre":
            return self._pre(identifier)
        raise InvalidIncrement(f"invalid increment argument: {release}")

    def _pre(self, identifier: str | None) -> Version:
        parts = list(self.prerelease)
        if not parts:
            parts = [0]
        else:
            for index in range(len(parts) - 1, -1, -1):
                if isinstance(parts[index], int):
                    parts[index] += 1
                    break
            else:
                # nothing numeric to bump
                parts.append(0)

        if identifier:
            # 1.2.0-beta.1 bumps to 1.2.0-beta.2,
            # 1.2.0-beta.fooblz or 1.2.0-beta bumps to 1.2.0-beta.0
            if parts[0] == identifier:
                if len(parts) < 2 or not isinstance(parts[1], int):
                    parts = [identifier, 0]
            else:
                parts = [identifier, 0]

        return replace(self, prerelease=tuple(parts), build=(), raw="")
