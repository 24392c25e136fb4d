"""Test release version parsing and ordering."""

import pytest

from upgrade_gate.exceptions import VersionParseError
from upgrade_gate.upgrade.versions import (
    Ordering,
    ReleaseVersion,
    compare,
    major_delta,
    parse_version,
)


class TestReleaseVersion:
    def test_parse_version(self):
        """Test parsing a dotted version."""
        version = ReleaseVersion.parse("3.2.1")
        assert (version.major, version.minor, version.patch) == (3, 2, 1)
        assert str(version) == "3.2.1"

    def test_parse_large_components(self):
        assert parse_version("10.20.300").as_tuple() == (10, 20, 300)
        assert parse_version("0.0.0").as_tuple() == (0, 0, 0)

    @pytest.mark.parametrize("value", ["03.0.0", "3.01.0", "3.0.00", "00.0.0"])
    def test_parse_rejects_leading_zeros(self, value):
        """Test leading zeros are rejected so labels match catalog names."""
        with pytest.raises(VersionParseError):
            ReleaseVersion.parse(value)

    @pytest.mark.parametrize(
        "value",
        ["", "3", "3.2", "3.2.1.0", "v3.2.1", "3.2.x", "-1.0.0", "3.2.1-rc1", " 3.2.1", "3..1"],
    )
    def test_parse_invalid(self, value):
        """Test malformed versions raise VersionParseError."""
        with pytest.raises(VersionParseError):
            ReleaseVersion.parse(value)

    def test_parse_non_string(self):
        with pytest.raises(VersionParseError):
            ReleaseVersion.parse(None)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError, match="MAJOR.MINOR.PATCH"):
            parse_version("latest")

    def test_structural_equality(self):
        assert ReleaseVersion.parse("3.0.0") == ReleaseVersion(major=3, minor=0, patch=0)
        assert ReleaseVersion.parse("3.0.0") != ReleaseVersion.parse("3.0.1")
        assert len({ReleaseVersion.parse("1.2.3"), ReleaseVersion.parse("1.2.3")}) == 1

    def test_ordering_is_lexicographic(self):
        """Test ordering compares major, then minor, then patch."""
        assert ReleaseVersion.parse("2.9.9") < ReleaseVersion.parse("3.0.0")
        assert ReleaseVersion.parse("3.1.0") > ReleaseVersion.parse("3.0.9")
        assert ReleaseVersion.parse("3.0.10") > ReleaseVersion.parse("3.0.9")
        assert ReleaseVersion.parse("3.0.0") <= ReleaseVersion.parse("3.0.0")


class TestCompare:
    def test_compare(self):
        a = parse_version("3.0.0")
        b = parse_version("4.0.0")

        assert compare(a, b) is Ordering.LESS
        assert compare(b, a) is Ordering.GREATER
        assert compare(a, parse_version("3.0.0")) is Ordering.EQUAL

    def test_major_delta(self):
        """Test the signed major delta."""
        assert major_delta(parse_version("3.0.0"), parse_version("4.5.0")) == 1
        assert major_delta(parse_version("3.0.0"), parse_version("7.0.0")) == 4
        assert major_delta(parse_version("3.4.1"), parse_version("3.1.0")) == 0
        assert major_delta(parse_version("3.0.0"), parse_version("2.9.0")) == -1
