"""Desugar shorthand range syntax into plain comparator text.

Each ``replace_*`` function maps a single atom (or, for hyphen ranges, a whole
comparator-set) to space-separated comparators such as ``>=1.2.0 <1.3.0``.
Text that does not match the relevant pattern is returned unchanged.

Supported shorthands:
- hyphen ranges ``1.2 - 2.3`` => ``>=1.2.0 <2.4.0``
- caret ranges ``^1.2.3`` => ``>=1.2.3 <2.0.0``
- tilde ranges ``~1.2.3`` / ``~>1.2.3`` => ``>=1.2.3 <1.3.0``
- x-ranges ``1.2.x``, ``>=1.2``, ``*``
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..grammar import (
    CARET_TRIM_RE,
    COMPARATOR_TRIM_RE,
    STAR_RE,
    TILDE_TRIM_RE,
    WHITESPACE_RE,
    dialect,
)

logger = logging.getLogger(__name__)


def is_x(identifier: str | None) -> bool:
    return not identifier or identifier.lower() == "x" or identifier == "*"


def _bump(identifier: str) -> str:
    return str(int(identifier) + 1)


def replace_hyphen(text: str, loose: bool = False) -> str:
    """Rewrite ``A - B`` into ``>=A <=B``, honouring wildcards on either side.

    1.2 - 3.4.5 => >=1.2.0 <=3.4.5
    1.2.3 - 3.4 => >=1.2.3 <3.5.0 (any 3.4.x will do)
    """
    match = dialect(loose).hyphen_range.fullmatch(text)
    if match is None:
        return text

    (frm, f_major, f_minor, f_patch, _f_pre, _f_build,
     to, t_major, t_minor, t_patch, t_pre, _t_build) = match.groups()

    if is_x(f_major):
        lower = ""
    elif is_x(f_minor):
        lower = f">={f_major}.0.0"
    elif is_x(f_patch):
        lower = f">={f_major}.{f_minor}.0"
    else:
        lower = f">={frm}"

    if is_x(t_major):
        upper = ""
    elif is_x(t_minor):
        upper = f"<{_bump(t_major)}.0.0"
    elif is_x(t_patch):
        upper = f"<{t_major}.{_bump(t_minor)}.0"
    elif t_pre:
        upper = f"<={t_major}.{t_minor}.{t_patch}-{t_pre}"
    else:
        upper = f"<={to}"

    return f"{lower} {upper}".strip()


def trim_operators(text: str) -> str:
    """Glue comparator prefixes, tildes and carets to their operands.

    ``> 1.2.3`` => ``>1.2.3``, ``~ 1.2.3`` => ``~1.2.3``, ``^ 1.2.3`` => ``^1.2.3``
    """
    text = COMPARATOR_TRIM_RE.sub(r"\1\2\3", text)
    text = TILDE_TRIM_RE.sub(r"\1~", text)
    return CARET_TRIM_RE.sub(r"\1^", text)


def replace_caret(atom: str, loose: bool = False) -> str:
    """Desugar one caret atom.

    ^2, ^2.x, ^2.x.x => >=2.0.0 <3.0.0
    ^0.2, ^0.2.x => >=0.2.0 <0.3.0
    ^1.2.3 => >=1.2.3 <2.0.0
    ^0.2.3 => >=0.2.3 <0.3.0
    ^0.0.3 => >=0.0.3 <0.0.4
    """
    match = dialect(loose).caret.fullmatch(atom)
    if match is None:
        return atom
    major, minor, patch, pre, _build = match.groups()

    if is_x(major):
        return ""
    if is_x(minor):
        return f">={major}.0.0 <{_bump(major)}.0.0"
    if is_x(patch):
        if major == "0":
            return f">={major}.{minor}.0 <{major}.{_bump(minor)}.0"
        return f">={major}.{minor}.0 <{_bump(major)}.0.0"

    lower = f">={major}.{minor}.{patch}" + (f"-{pre}" if pre else "")
    if major == "0":
        if minor == "0":
            return f"{lower} <{major}.{minor}.{_bump(patch)}"
        return f"{lower} <{major}.{_bump(minor)}.0"
    return f"{lower} <{_bump(major)}.0.0"


def replace_tilde(atom: str, loose: bool = False) -> str:
    """Desugar one tilde atom.

    ~, ~> => (any)
    ~2, ~2.x, ~>2 => >=2.0.0 <3.0.0
    ~1.2, ~1.2.x, ~>1.2 => >=1.2.0 <1.3.0
    ~1.2.3, ~>1.2.3 => >=1.2.3 <1.3.0
    """
    match = dialect(loose).tilde.fullmatch(atom)
    if match is None:
        return atom
    major, minor, patch, pre, _build = match.groups()

    if is_x(major):
        return ""
    if is_x(minor):
        return f">={major}.0.0 <{_bump(major)}.0.0"
    if is_x(patch):
        return f">={major}.{minor}.0 <{major}.{_bump(minor)}.0"
    lower = f">={major}.{minor}.{patch}" + (f"-{pre}" if pre else "")
    return f"{lower} <{major}.{_bump(minor)}.0"


def replace_xrange(atom: str, loose: bool = False) -> str:
    """Desugar one x-range atom, optionally prefixed by a relational operator.

    * => *, >* => <0.0.0
    1.2.x => >=1.2.0 <1.3.0
    >1.2 => >=1.3.0, <=1.2 => <1.3.0, >=1.2 => >=1.2.0
    """
    atom = atom.strip()
    match = dialect(loose).xrange.fullmatch(atom)
    if match is None:
        return atom
    gtlt, major, minor, patch, _pre, _build = match.groups()

    x_major = is_x(major)
    x_minor = x_major or is_x(minor)
    x_patch = x_minor or is_x(patch)
    any_x = x_patch

    if gtlt == "=" and any_x:
        gtlt = ""

    if x_major:
        if gtlt in (">", "<"):
            # nothing is allowed
            return "<0.0.0"
        # nothing is forbidden
        return "*"

    if gtlt and any_x:
        if x_minor:
            minor = "0"
        if x_patch:
            patch = "0"

        if gtlt == ">":
            # >1 => >=2.0.0, >1.2 => >=1.3.0
            gtlt = ">="
            if x_minor:
                major = _bump(major)
                minor = "0"
                patch = "0"
            else:
                minor = _bump(minor)
                patch = "0"
        elif gtlt == "<=":
            # <=0.7.x is actually <0.8.0, since any 0.7.x should pass
            gtlt = "<"
            if x_minor:
                major = _bump(major)
            else:
                minor = _bump(minor)

        return f"{gtlt}{major}.{minor}.{patch}"

    if x_minor:
        return f">={major}.0.0 <{_bump(major)}.0.0"
    if x_patch:
        return f">={major}.{minor}.0 <{major}.{_bump(minor)}.0"
    return atom


def replace_star(atom: str) -> str:
    """Remove a star atom: ``*`` is AND-ed with everything else, so it adds nothing."""
    return STAR_RE.sub("", atom.strip(), count=1)


def _each(text: str, func: Callable[[str, bool], str], loose: bool) -> str:
    return " ".join(func(atom, loose) for atom in WHITESPACE_RE.split(text.strip()))


def desugar_atom(atom: str, loose: bool = False) -> str:
    """Turn a caret, tilde, x-range or star atom into plain comparators."""
    text = _each(atom, replace_caret, loose)
    text = _each(text, replace_tilde, loose)
    text = " ".join(replace_xrange(part, loose) for part in WHITESPACE_RE.split(text))
    return replace_star(text)


def desugar(text: str, loose: bool = False) -> list[str]:
    """Return the comparator atoms of one ``||``-free comparator-set."""
    text = replace_hyphen(text.strip(), loose)
    logger.debug("hyphen replace: %s", text)
    text = trim_operators(text)
    logger.debug("operator trim: %s", text)

    atoms = WHITESPACE_RE.split(text)
    desugared = " ".join(desugar_atom(atom, loose) for atom in atoms)
    logger.debug("desugared: %s", desugared)
    return WHITESPACE_RE.split(desugared)

