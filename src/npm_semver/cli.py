"""Command-line front end.

Usage:
  npm-semver [options] <version> [<version> [...]]

Prints the valid versions, sorted by precedence, that satisfy every given
range. Exits 1 when no version remains or the arguments are misused.
"""

from __future__ import annotations

import argparse
import functools
import logging
import sys

from . import __version__
from .compare import compare, rcompare
from .core import clean, coerce, inc, satisfies, valid
from .models.version import RELEASE_TYPES
from .options import Options, debug_enabled

logger = logging.getLogger(__name__)

INC_MISUSE_MESSAGE = "--inc can only be used on a single version with no range"


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    root = logging.getLogger("npm_semver")
    root.setLevel(logging.DEBUG)
    # Only add handler if none exist
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        root.addHandler(handler)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = Options.from_env()
    parser = argparse.ArgumentParser(prog="npm-semver", description=__doc__.split("\n\n")[0])
    parser.add_argument("versions", nargs="*", metavar="version")
    parser.add_argument(
        "-r",
        "--range",
        dest="ranges",
        action="append",
        default=[],
        help="Print versions that match the specified range (repeatable)",
    )
    parser.add_argument(
        "-i",
        "--inc",
        "--increment",
        dest="increment",
        nargs="?",
        const="patch",
        default=None,
        metavar="LEVEL",
        help=f"Increment a version by the specified level: {', '.join(RELEASE_TYPES)}. "
        "Default level is 'patch'. Only one version may be specified.",
    )
    parser.add_argument(
        "--preid",
        dest="identifier",
        default=None,
        help="Identifier to be used to prefix premajor, preminor, prepatch or prerelease",
    )
    parser.add_argument(
        "-l",
        "--loose",
        action="store_true",
        default=defaults.loose,
        help="Interpret versions and ranges loosely",
    )
    parser.add_argument(
        "-p",
        "--include-prerelease",
        action="store_true",
        default=defaults.include_prerelease,
        help="Always include prerelease versions in range matching",
    )
    parser.add_argument(
        "-c",
        "--coerce",
        action="store_true",
        help="Coerce a string into SemVer if possible (does not imply --loose)",
    )
    parser.add_argument(
        "-rv",
        "--rv",
        "--reverse",
        dest="reverse",
        action="store_true",
        help="Sort the output in descending order",
    )
    parser.add_argument("--debug", action="store_true", default=debug_enabled())
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_intermixed_args(argv)

    # `-i 1.2.3` means "increment patch": the token is a version, not a level.
    if args.increment is not None and args.increment not in RELEASE_TYPES:
        args.versions.insert(0, args.increment)
        args.increment = "patch"
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)
    options = Options(loose=args.loose, include_prerelease=args.include_prerelease)

    versions: list[str] = args.versions
    if not versions:
        return 1

    if args.increment and (len(versions) != 1 or args.ranges):
        print(INC_MISUSE_MESSAGE, file=sys.stderr)
        return 1

    if args.coerce:
        versions = [_coerced(v) for v in versions]
    versions = [v for v in versions if valid(v, options)]
    if not versions:
        return 1

    for range_ in args.ranges:
        versions = [v for v in versions if satisfies(v, range_, options)]
        logger.debug("%d version(s) left after range %r", len(versions), range_)
        if not versions:
            return 1

    order = rcompare if args.reverse else compare
    key = functools.cmp_to_key(lambda a, b: order(a, b, options))
    for version in sorted(versions, key=key):
        output = clean(version, options)
        if args.increment:
            output = inc(output, args.increment, options, args.identifier)
        print(output)
    return 0


def _coerced(version: str) -> str:
    coerced = coerce(version)
    return coerced.version if coerced else version


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
