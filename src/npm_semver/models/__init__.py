"""Immutable value types: versions, comparators and ranges."""

from __future__ import annotations

from .comparator import ANY, AnyVersion, Comparator, Operator
from .range import Range
from .version import RELEASE_TYPES, Version

__all__ = [
    "ANY",
    "AnyVersion",
    "Comparator",
    "Operator",
    "RELEASE_TYPES",
    "Range",
    "Version",
]
