"""npm-compatible semantic versioning.

Parses versions in the strict and loose dialects, orders them by semver
precedence, and evaluates npm range expressions (``^1.2.3``, ``~1.2``,
``1.x``, ``1.2 - 2.3``, ``>=1.0.0 <2.0.0 || 3.x``) against them.
"""

__version__ = "1.0.0"

# Note: this is the semver.org version that is implemented,
# not necessarily the package version of this code.
SEMVER_SPEC_VERSION = "2.0.0"

from .compare import (  # noqa: E402
    cmp,
    compare,
    compare_identifiers,
    compare_loose,
    eq,
    gt,
    gte,
    lt,
    lte,
    neq,
    rcompare,
    rcompare_identifiers,
    rsort,
    sort,
)
from .core import (  # noqa: E402
    clean,
    coerce,
    inc,
    major,
    max_satisfying,
    min_satisfying,
    minor,
    parse,
    patch,
    prerelease,
    satisfies,
    valid,
    valid_range,
)
from .errors import (  # noqa: E402
    InvalidComparator,
    InvalidIncrement,
    InvalidOperator,
    InvalidRange,
    InvalidVersion,
    SemverError,
)
from .grammar import MAX_LENGTH, MAX_SAFE_COMPONENT_LENGTH, MAX_SAFE_INTEGER  # noqa: E402
from .models import ANY, Comparator, Operator, Range, Version  # noqa: E402
from .options import Options  # noqa: E402

__all__ = [
    # Constants
    "MAX_LENGTH",
    "MAX_SAFE_COMPONENT_LENGTH",
    "MAX_SAFE_INTEGER",
    "SEMVER_SPEC_VERSION",
    # Models
    "ANY",
    "Comparator",
    "Operator",
    "Options",
    "Range",
    "Version",
    # Lenient entry points
    "clean",
    "coerce",
    "inc",
    "max_satisfying",
    "min_satisfying",
    "parse",
    "prerelease",
    "satisfies",
    "valid",
    "valid_range",
    # Strict entry points
    "cmp",
    "compare",
    "compare_identifiers",
    "compare_loose",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    "major",
    "minor",
    "neq",
    "patch",
    "rcompare",
    "rcompare_identifiers",
    "rsort",
    "sort",
    # Errors
    "InvalidComparator",
    "InvalidIncrement",
    "InvalidOperator",
    "InvalidRange",
    "InvalidVersion",
    "SemverError",
]
