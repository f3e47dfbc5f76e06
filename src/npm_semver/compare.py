"""Version precedence and the comparison helpers derived from it."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import InvalidOperator
from .grammar import NUMERIC_RE
from .models.comparator import Operator
from .models.version import Identifier, Version
from .options import OptionsLike


def _is_numeric(identifier: Identifier) -> bool:
    return isinstance(identifier, int) or NUMERIC_RE.fullmatch(identifier) is not None


def compare_identifiers(a: Identifier, b: Identifier) -> int:
    """Order two prerelease identifiers.

    Numeric identifiers always sort below non-numeric ones; two numeric
    identifiers compare numerically and two tokens compare lexically.
    """
    anum = _is_numeric(a)
    bnum = _is_numeric(b)

    if anum and not bnum:
        return -1
    if bnum and not anum:
        return 1
    if anum and bnum:
        a, b = int(a), int(b)
    if a < b:  # type: ignore[operator]
        return -1
    if a > b:  # type: ignore[operator]
        return 1
    return 0


def rcompare_identifiers(a: Identifier, b: Identifier) -> int:
    return compare_identifiers(b, a)


def compare_main(a: Version, b: Version) -> int:
    return (
        compare_identifiers(a.major, b.major)
        or compare_identifiers(a.minor, b.minor)
        or compare_identifiers(a.patch, b.patch)
    )


def compare_pre(a: Version, b: Version) -> int:
    # NOT having a prerelease is > having one
    if a.prerelease and not b.prerelease:
        return -1
    if not a.prerelease and b.prerelease:
        return 1
    if not a.prerelease and not b.prerelease:
        return 0

    index = 0
    while True:
        left = a.prerelease[index] if index < len(a.prerelease) else None
        right = b.prerelease[index] if index < len(b.prerelease) else None
        if left is None and right is None:
            return 0
        if right is None:
            return 1
        if left is None:
            return -1
        if left != right:
            return compare_identifiers(left, right)
        index += 1


def compare(a: Version | str, b: Version | str, options: OptionsLike = None) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to, or after ``b``.

    Raises:
        InvalidVersion: if either side does not parse.
    """
    return Version.parse(a, options).compare(Version.parse(b, options))


def rcompare(a: Version | str, b: Version | str, options: OptionsLike = None) -> int:
    return compare(b, a, options)


def compare_loose(a: Version | str, b: Version | str) -> int:
    return compare(a, b, True)


def gt(a: Version | str, b: Version | str, options: OptionsLike = None) -> bool:
    return compare(a, b, options) > 0


def gte(a: Version | str, b: Version | str, options: OptionsLike = None) -> bool:
    return compare(a, b, options) >= 0


def lt(a: Version | str, b: Version | str, options: OptionsLike = None) -> bool:
    return compare(a, b, options) < 0


def lte(a: Version | str, b: Version | str, options: OptionsLike = None) -> bool:
    return compare(a, b, options) <= 0


def eq(a: Version | str, b: Version | str, options: OptionsLike = None) -> bool:
    return compare(a, b, options) == 0


def neq(a: Version | str, b: Version | str, options: OptionsLike = None) -> bool:
    return compare(a, b, options) != 0


_OPERATORS = {
    "": eq,
    "=": eq,
    "==": eq,
    ">": gt,
    ">=": gte,
    "<": lt,
    "<=": lte,
}


def cmp(
    a: Version | str,
    operator: Operator | str,
    b: Version | str,
    options: OptionsLike = None,
) -> bool:
    """Evaluate ``a <operator> b``.

    Raises:
        InvalidOperator: if ``operator`` is not one of the relational symbols.
        InvalidVersion: if either side does not parse.
    """
    symbol = operator.value if isinstance(operator, Operator) else operator
    func = _OPERATORS.get(symbol) if isinstance(symbol, str) else None
    if func is None:
        raise InvalidOperator(f"Invalid operator: {operator}")
    return func(a, b, options)


def sort(versions: Iterable[Version | str], options: OptionsLike = None) -> list[Version | str]:
    """Return ``versions`` in ascending precedence (stable for equal versions)."""
    return sorted(versions, key=lambda v: Version.parse(v, options))


def rsort(versions: Iterable[Version | str], options: OptionsLike = None) -> list[Version | str]:
    return sorted(versions, key=lambda v: Version.parse(v, options), reverse=True)
