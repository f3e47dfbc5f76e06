"""Typed failures raised by the strict entry points."""

from __future__ import annotations


class SemverError(ValueError):
    """Base error for malformed versions, comparators and ranges."""


class InvalidVersion(SemverError):
    """Raised when a value cannot be parsed as a version."""


class InvalidComparator(SemverError):
    """Raised when a comparator atom does not match the comparator grammar."""


class InvalidRange(SemverError):
    """Raised when a range expression has no parseable comparator-set."""


class InvalidOperator(SemverError):
    """Raised when ``cmp`` receives an unrecognized operator."""


class InvalidIncrement(SemverError):
    """Raised when a version is incremented with an unknown release type."""
