"""Range of versions: a union of comparator-set intersections."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..errors import InvalidComparator, InvalidRange, InvalidVersion
from ..grammar import OR_SPLIT_RE, dialect
from ..options import Options, OptionsLike
from ..parsers.range import desugar
from .comparator import ANY, Comparator
from .version import Version

logger = logging.getLogger(__name__)

ComparatorSet = tuple[Comparator, ...]


def _parse_set(text: str, opts: Options) -> ComparatorSet:
    """Build the comparators of one ``||``-free candidate.

    Raises:
        InvalidComparator: in strict mode, when a desugared atom does not parse.
    """
    atoms = desugar(text, opts.loose)
    if opts.loose:
        # in loose mode, throw out any that are not valid comparators
        pattern = dialect(True).comparator
        dropped = [atom for atom in atoms if not pattern.fullmatch(atom)]
        if dropped:
            logger.debug("dropping invalid loose comparators: %s", dropped)
            atoms = [atom for atom in atoms if atom not in dropped]
    return tuple(Comparator.parse(atom, opts) for atom in atoms)


def _test_set(comparators: ComparatorSet, version: Version, include_prerelease: bool) -> bool:
    if not all(comparator.test(version) for comparator in comparators):
        return False

    if version.prerelease and not include_prerelease:
        # Find the comparators whose operand may admit prereleases. For example,
        # ^1.2.3-pr.1 desugars to >=1.2.3-pr.1 <2.0.0, which should let
        # 1.2.3-pr.2 pass while 1.2.4-alpha.notready stays excluded.
        for comparator in comparators:
            allowed = comparator.operand
            if allowed is ANY or not allowed.prerelease:
                continue
            if (allowed.major, allowed.minor, allowed.patch) == (
                version.major,
                version.minor,
                version.patch,
            ):
                return True
        # Version has a -pre, but it's not one of the ones we like.
        return False

    return True


@dataclass(slots=True, frozen=True)
class Range:
    """An immutable ``||``-joined union of comparator-sets."""

    raw: str
    comparator_sets: tuple[ComparatorSet, ...]
    options: Options = Options()

    def __post_init__(self) -> None:
        if not self.comparator_sets or not all(self.comparator_sets):
            raise InvalidRange(f"Invalid SemVer Range: {self.raw}")

    @classmethod
    def parse(cls, text: Range | str, options: OptionsLike = None) -> Range:
        """Parse a range expression.

        A blank or unparsable ``||`` branch is discarded.

        Raises:
            InvalidRange: if ``text`` is not a string or no branch survives.
        """
        opts = Options.coerce(options)
        if isinstance(text, Range):
            if text.options == opts:
                return text
            text = text.raw
        elif not isinstance(text, str):
            raise InvalidRange(f"Invalid SemVer Range: {text!r}")

        sets: list[ComparatorSet] = []
        for candidate in OR_SPLIT_RE.split(text):
            candidate = candidate.strip()
            if not candidate:
                continue
            try:
                comparators = _parse_set(candidate, opts)
            except InvalidComparator as exc:
                logger.debug("discarding comparator-set %r: %s", candidate, exc)
                continue
            # throw out any that are not relevant for whatever reason
            if comparators:
                sets.append(comparators)

        if not sets:
            raise InvalidRange(f"Invalid SemVer Range: {text}")
        return cls(raw=text, comparator_sets=tuple(sets), options=opts)

    @property
    def loose(self) -> bool:
        return self.options.loose

    @property
    def include_prerelease(self) -> bool:
        return self.options.include_prerelease

    @property
    def range(self) -> str:
        """Normalised form: comparators joined by spaces, sets joined by ``||``."""
        return "||".join(
            " ".join(c.value for c in comparators).strip() for comparators in self.comparator_sets
        ).strip()

    def __str__(self) -> str:
        return self.range

    def to_comparators(self) -> list[list[str]]:
        return [[c.value for c in comparators] for comparators in self.comparator_sets]

    def test(self, version: Version | str | None) -> bool:
        """Return True if ``version`` satisfies every comparator of some set.

        Raises:
            InvalidVersion: if ``version`` is a string that does not parse.
        """
        if not version:
            return False
        if not isinstance(version, Version):
            version = Version.parse(version, self.options)
        return any(
            _test_set(comparators, version, self.include_prerelease)
            for comparators in self.comparator_sets
        )

    def filter(self, versions: Iterable[Version | str]) -> Iterable[Version]:
        """Yield the parseable ``versions`` that satisfy this range."""
        for candidate in versions:
            try:
                version = Version.parse(candidate, self.options)
            except InvalidVersion:
                continue
            if self.test(version):
                yield version
