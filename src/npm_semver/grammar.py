"""Regular grammar for versions and range atoms.

Fragments are composed bottom-up into a strict and a loose dialect. Everything
here is compiled once at import time and never mutated afterwards.

Anchored patterns are stored without ``^``/``$`` and applied with
``fullmatch`` so a trailing newline is never accepted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

MAX_LENGTH = 256
MAX_SAFE_INTEGER = 2**53 - 1

# Max digits per component considered by coerce().
MAX_SAFE_COMPONENT_LENGTH = 16

# ## Identifiers
# A single `0`, or a non-zero digit followed by zero or more digits.
NUMERIC_IDENTIFIER = r"0|[1-9][0-9]*"
NUMERIC_IDENTIFIER_LOOSE = r"[0-9]+"

# Zero or more digits, followed by a letter or hyphen, and then zero or more
# letters, digits, or hyphens.
NON_NUMERIC_IDENTIFIER = r"[0-9]*[a-zA-Z-][a-zA-Z0-9-]*"

MAIN_VERSION = rf"({NUMERIC_IDENTIFIER})\.({NUMERIC_IDENTIFIER})\.({NUMERIC_IDENTIFIER})"
MAIN_VERSION_LOOSE = (
    rf"({NUMERIC_IDENTIFIER_LOOSE})\.({NUMERIC_IDENTIFIER_LOOSE})\.({NUMERIC_IDENTIFIER_LOOSE})"
)

PRERELEASE_IDENTIFIER = rf"(?:{NUMERIC_IDENTIFIER}|{NON_NUMERIC_IDENTIFIER})"
PRERELEASE_IDENTIFIER_LOOSE = rf"(?:{NUMERIC_IDENTIFIER_LOOSE}|{NON_NUMERIC_IDENTIFIER})"

# Only the identifiers are captured, never the leading hyphen.
PRERELEASE = rf"(?:-({PRERELEASE_IDENTIFIER}(?:\.{PRERELEASE_IDENTIFIER})*))"
PRERELEASE_LOOSE = rf"(?:-?({PRERELEASE_IDENTIFIER_LOOSE}(?:\.{PRERELEASE_IDENTIFIER_LOOSE})*))"

BUILD_IDENTIFIER = r"[0-9A-Za-z-]+"
BUILD = rf"(?:\+({BUILD_IDENTIFIER}(?:\.{BUILD_IDENTIFIER})*))"

# ## Full version
# Groups: major, minor, patch, prerelease, build.
FULL_PLAIN = rf"v?{MAIN_VERSION}{PRERELEASE}?{BUILD}?"

# Like FULL_PLAIN, but tolerates `v1.2.3`, `=1.2.3` and `1.0.0alpha1`, which
# are common in the npm registry.
LOOSE_PLAIN = rf"[v=\s]*{MAIN_VERSION_LOOSE}{PRERELEASE_LOOSE}?{BUILD}?"

GTLT = r"((?:<|>)?=?)"

# ## X-ranges
# Something like `2.*` or `1.2.x`. Only the first component is required.
XRANGE_IDENTIFIER = rf"{NUMERIC_IDENTIFIER}|x|X|\*"
XRANGE_IDENTIFIER_LOOSE = rf"{NUMERIC_IDENTIFIER_LOOSE}|x|X|\*"

# Groups: major, minor, patch, prerelease, build.
XRANGE_PLAIN = (
    rf"[v=\s]*({XRANGE_IDENTIFIER})"
    rf"(?:\.({XRANGE_IDENTIFIER})"
    rf"(?:\.({XRANGE_IDENTIFIER})"
    rf"(?:{PRERELEASE})?{BUILD}?"
    r")?)?"
)
XRANGE_PLAIN_LOOSE = (
    rf"[v=\s]*({XRANGE_IDENTIFIER_LOOSE})"
    rf"(?:\.({XRANGE_IDENTIFIER_LOOSE})"
    rf"(?:\.({XRANGE_IDENTIFIER_LOOSE})"
    rf"(?:{PRERELEASE_LOOSE})?{BUILD}?"
    r")?)?"
)

XRANGE = rf"{GTLT}\s*{XRANGE_PLAIN}"
XRANGE_LOOSE = rf"{GTLT}\s*{XRANGE_PLAIN_LOOSE}"

# ## Coercion
# Anything that could conceivably be part of a valid version.
COERCE = (
    r"(?:^|[^0-9])"
    rf"([0-9]{{1,{MAX_SAFE_COMPONENT_LENGTH}}})"
    rf"(?:\.([0-9]{{1,{MAX_SAFE_COMPONENT_LENGTH}}}))?"
    rf"(?:\.([0-9]{{1,{MAX_SAFE_COMPONENT_LENGTH}}}))?"
    r"(?:$|[^0-9])"
)

# ## Tilde ranges: "reasonably at or greater than"
LONE_TILDE = r"(?:~>?)"
TILDE_TRIM = rf"(\s*){LONE_TILDE}\s+"
TILDE = rf"{LONE_TILDE}{XRANGE_PLAIN}"
TILDE_LOOSE = rf"{LONE_TILDE}{XRANGE_PLAIN_LOOSE}"

# ## Caret ranges: "at least and backwards compatible with"
LONE_CARET = r"(?:\^)"
CARET_TRIM = rf"(\s*){LONE_CARET}\s+"
CARET = rf"{LONE_CARET}{XRANGE_PLAIN}"
CARET_LOOSE = rf"{LONE_CARET}{XRANGE_PLAIN_LOOSE}"

# A simple gt/lt/eq thing, or just "" to indicate "any version".
# Groups: operator, operand, then the operand's version groups.
COMPARATOR = rf"{GTLT}\s*({FULL_PLAIN})|"
COMPARATOR_LOOSE = rf"{GTLT}\s*({LOOSE_PLAIN})|"

# Strips whitespace between an operator and its operand: `> 1.2.3` => `>1.2.3`.
COMPARATOR_TRIM = rf"(\s*){GTLT}\s*({LOOSE_PLAIN}|{XRANGE_PLAIN})"

# ## Hyphen ranges: `1.2.3 - 1.2.4`
# Groups: from, from major/minor/patch/prerelease/build, to, to major/...
HYPHEN_RANGE = rf"\s*({XRANGE_PLAIN})\s+-\s+({XRANGE_PLAIN})\s*"
HYPHEN_RANGE_LOOSE = rf"\s*({XRANGE_PLAIN_LOOSE})\s+-\s+({XRANGE_PLAIN_LOOSE})\s*"

# Star ranges allow anything at all; looseness does not apply.
STAR = r"(<|>)?=?\s*\*"


@dataclass(slots=True, frozen=True)
class Dialect:
    """Compiled patterns for one dialect (strict or loose)."""

    loose: bool
    full: re.Pattern[str]
    xrange: re.Pattern[str]
    tilde: re.Pattern[str]
    caret: re.Pattern[str]
    comparator: re.Pattern[str]
    hyphen_range: re.Pattern[str]


STRICT = Dialect(
    loose=False,
    full=re.compile(FULL_PLAIN),
    xrange=re.compile(XRANGE),
    tilde=re.compile(TILDE),
    caret=re.compile(CARET),
    comparator=re.compile(COMPARATOR),
    hyphen_range=re.compile(HYPHEN_RANGE),
)

LOOSE = Dialect(
    loose=True,
    full=re.compile(LOOSE_PLAIN),
    xrange=re.compile(XRANGE_LOOSE),
    tilde=re.compile(TILDE_LOOSE),
    caret=re.compile(CARET_LOOSE),
    comparator=re.compile(COMPARATOR_LOOSE),
    hyphen_range=re.compile(HYPHEN_RANGE_LOOSE),
)

COERCE_RE = re.compile(COERCE)
TILDE_TRIM_RE = re.compile(TILDE_TRIM)
CARET_TRIM_RE = re.compile(CARET_TRIM)
COMPARATOR_TRIM_RE = re.compile(COMPARATOR_TRIM)
STAR_RE = re.compile(STAR)
NUMERIC_RE = re.compile(r"[0-9]+")
OR_SPLIT_RE = re.compile(r"\s*\|\|\s*")
WHITESPACE_RE = re.compile(r"\s+")


def dialect(loose: bool) -> Dialect:
    return LOOSE if loose else STRICT
