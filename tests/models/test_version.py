"""Tests for the Version value type."""

from __future__ import annotations

import pytest

from npm_semver import MAX_SAFE_INTEGER, InvalidIncrement, InvalidVersion, Version


class TestParse:
    """Version.parse in both dialects."""

    def test_full_version(self):
        """Should split main, prerelease and build sections."""
        v = Version.parse("1.2.3-alpha.1+build.11.e0f985a")
        assert (v.major, v.minor, v.patch) == (1, 2, 3)
        assert v.prerelease == ("alpha", 1)
        assert v.build == ("build", "11", "e0f985a")
        assert v.version == "1.2.3-alpha.1"
        assert str(v) == "1.2.3-alpha.1"
        assert v.raw == "1.2.3-alpha.1+build.11.e0f985a"

    def test_surrounding_whitespace_is_trimmed(self):
        assert Version.parse(" 1.2.3 ").version == "1.2.3"
        assert Version.parse("\tv1.2.3").version == "1.2.3"

    @pytest.mark.parametrize(
        "text",
        ["", "1", "1.2", "1.2.3.4", "01.2.3", "1.02.3", "1.2.03", "=1.2.3", "1.2.3-01", "1.2.3alpha",
         "a.b.c", "1.2.3-", "1.2.3+", "1.2.3 4"],
    )
    def test_strict_rejects(self, text):
        with pytest.raises(InvalidVersion):
            Version.parse(text)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("=1.2.3", "1.2.3"),
            ("v=1.2.3", "1.2.3"),
            ("01.02.03", "1.2.3"),
            ("1.2.3alpha", "1.2.3-alpha"),
            ("1.2.3-01", "1.2.3-1"),
            ("  =v1.2.3-beta+exp", "1.2.3-beta"),
        ],
    )
    def test_loose_accepts(self, text, expected):
        v = Version.parse(text, True)
        assert v.version == expected
        assert v.loose is True

    @pytest.mark.parametrize("value", [None, {}, 123, ["1.2.3"]])
    def test_non_string_input(self, value):
        with pytest.raises(InvalidVersion):
            Version.parse(value)

    def test_too_long(self):
        """Should reject input over 256 characters even in loose mode."""
        text = "1.2." + "1" * 255
        with pytest.raises(InvalidVersion):
            Version.parse(text)
        with pytest.raises(InvalidVersion):
            Version.parse(text, True)

    def test_component_above_safe_integer(self):
        with pytest.raises(InvalidVersion):
            Version.parse("1.2." + "1" * 99)
        with pytest.raises(InvalidVersion):
            Version.parse(f"{MAX_SAFE_INTEGER + 1}.0.0")

    def test_component_at_safe_integer(self):
        assert Version.parse(f"{MAX_SAFE_INTEGER}.0.0").major == MAX_SAFE_INTEGER

    def test_numeric_prerelease_identifiers_become_ints(self):
        v = Version.parse("1.2.3-0.beta.10")
        assert v.prerelease == (0, "beta", 10)

    def test_oversized_numeric_prerelease_stays_a_token(self):
        v = Version.parse("1.2.3-" + "9" * 20)
        assert v.prerelease == ("9" * 20,)

    def test_same_looseness_returns_same_instance(self):
        v = Version.parse("1.2.3")
        assert Version.parse(v) is v

    def test_other_looseness_reparses_canonical_form(self):
        v = Version.parse("1.2.3-beta+build")
        loose = Version.parse(v, {"loose": True})
        assert loose is not v
        assert loose.loose is True
        assert loose == v
        assert loose.build == ()


class TestValue:
    """Equality, hashing and formatting."""

    def test_build_ignored_for_equality_and_hash(self):
        a = Version.parse("1.2.3+build1")
        b = Version.parse("1.2.3+build2")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_format_with_build(self):
        v = Version.parse("1.2.3-rc.1+sha.5114f85")
        assert v.format() == "1.2.3-rc.1"
        assert v.format(include_build=True) == "1.2.3-rc.1+sha.5114f85"

    def test_direct_construction(self):
        v = Version(1, 2, 3, prerelease=("beta", 2))
        assert v.raw == "1.2.3-beta.2"
        assert v == Version.parse("1.2.3-beta.2")

    @pytest.mark.parametrize(("major", "minor", "patch"), [(-1, 0, 0), (0, -1, 0), (MAX_SAFE_INTEGER + 1, 0, 0)])
    def test_direct_construction_bounds(self, major, minor, patch):
        with pytest.raises(InvalidVersion):
            Version(major, minor, patch)

    def test_immutable(self):
        v = Version.parse("1.2.3")
        with pytest.raises(AttributeError):
            v.major = 2  # type: ignore[misc]

    @pytest.mark.parametrize(
        "text",
        ["0.0.0", "1.2.3", "1.2.3-alpha", "1.2.3-alpha.1.beta.11", "10.20.30-rc.1+build.5", "v4.5.6-0"],
    )
    def test_canonical_round_trip(self, text):
        v = Version.parse(text)
        again = Version.parse(str(v))
        assert again == v
        assert str(again) == str(v)

    def test_ordering_operators(self):
        assert Version.parse("1.2.3") < Version.parse("1.2.4")
        assert Version.parse("1.2.3-alpha") < Version.parse("1.2.3")
        assert Version.parse("2.0.0") >= Version.parse("2.0.0+meta")
        assert Version.parse("1.0.0") != Version.parse("1.0.1")


@pytest.mark.parametrize(
    ("text", "release", "identifier", "expected"),
    [
        ("1.2.3", "major", None, "2.0.0"),
        ("1.2.3", "minor", None, "1.3.0"),
        ("1.2.3", "patch", None, "1.2.4"),
        ("1.2.3-tag", "major", None, "2.0.0"),
        ("1.0.0-5", "major", None, "1.0.0"),
        ("1.2.0-5", "minor", None, "1.2.0"),
        ("1.2.0-5", "patch", None, "1.2.0"),
        ("1.2.3+build", "patch", None, "1.2.4"),
        ("1.2.3", "prerelease", None, "1.2.4-0"),
        ("1.2.3-0", "prerelease", None, "1.2.3-1"),
        ("1.2.3-alpha.0", "prerelease", None, "1.2.3-alpha.1"),
        ("1.2.3-alpha.0.beta", "prerelease", None, "1.2.3-alpha.1.beta"),
        ("1.2.3-alpha", "prerelease", None, "1.2.3-alpha.0"),
        ("1.2.3", "premajor", None, "2.0.0-0"),
        ("1.2.3", "preminor", None, "1.3.0-0"),
        ("1.2.3", "prepatch", None, "1.2.4-0"),
        ("1.2.3-1", "prepatch", None, "1.2.4-0"),
        ("1.2.3", "pre", None, "1.2.3-0"),
        ("1.2.3", "prerelease", "dev", "1.2.4-dev.0"),
        ("1.2.3-dev.0", "prerelease", "dev", "1.2.3-dev.1"),
        ("1.2.3-dev", "prerelease", "dev", "1.2.3-dev.0"),
        ("1.2.3-beta.1", "prerelease", "dev", "1.2.3-dev.0"),
        ("1.2.3", "premajor", "dev", "2.0.0-dev.0"),
        ("1.2.0", "preminor", "dev", "1.3.0-dev.0"),
        ("1.2.3", "prepatch", "dev", "1.2.4-dev.0"),
        ("1.2.3", "prerelease", "", "1.2.4-0"),
        ("1.2.3-beta.1", "prerelease", "", "1.2.3-beta.2"),
    ],
)
def test_increment(text, release, identifier, expected):
    original = Version.parse(text)
    bumped = original.increment(release, identifier)
    assert bumped.version == expected
    assert bumped.build == ()
    # the source value is untouched
    assert original.version == Version.parse(text).version


def test_increment_unknown_release():
    with pytest.raises(InvalidIncrement):
        Version.parse("1.2.3").increment("fake")
