# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from vsemver import (
    MalformedVersionError,
    ValidationError,
    Version,
    compare_versions,
    max_version,
    parse_version,
    sort_versions,
    version_key,
)


def pre(prerelease: str) -> Version:
    return Version(0, 0, 0, prerelease)


# (a, b, expected, reason)
PRECEDENCE_TABLE = [
    (Version(1, 0, 0), Version(0, 1, 1), 1, "major version"),
    (Version(1, 1, 0), Version(1, 0, 1), 1, "minor version"),
    (Version(1, 1, 1), Version(1, 1, 0), 1, "patch version"),
    (Version(1, 1, 1), Version(1, 1, 1), 0, "equal (no prerelease)"),
    (Version(0, 0, 0), pre("a"), 1, "no prerelease trumps prerelease"),
    (pre("a"), pre("a"), 0, "equal prerelease strings"),
    (pre("1"), pre("1"), 0, "equal prerelease numbers"),
    (pre("b"), pre("a"), 1, "string compare"),
    (pre("1"), pre("0"), 1, "number compare"),
    (pre("02"), pre("1"), 1, "number compare two digits"),
    (pre("b.1"), pre("a.1"), 1, "multiple; first"),
    (pre("a.2"), pre("a.1"), 1, "multiple; second"),
    (pre("a.1"), pre("a"), 1, "length mismatch"),
    (pre("a"), pre("1"), 1, "mismatch type"),
]


class TestPrecedenceTable:
    """Tests for the precedence table in both directions."""

    @pytest.mark.parametrize("a,b,expected,reason", PRECEDENCE_TABLE)
    def test_left(self, a, b, expected, reason):
        """Test the comparison as listed."""
        assert compare_versions(a, b) == expected, reason

    @pytest.mark.parametrize("a,b,expected,reason", PRECEDENCE_TABLE)
    def test_right(self, a, b, expected, reason):
        """Test the mirrored comparison."""
        assert compare_versions(b, a) == -expected, reason


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_numbers_compare_numerically(self):
        """Test that 10 sorts after 9."""
        assert compare_versions("1.10.0", "1.9.0") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_lexical_prerelease(self):
        """Test that alphanumeric identifiers compare in ASCII order."""
        assert compare_versions("1.0.0-alpha", "1.0.0-beta") == -1
        assert compare_versions("1.0.0-beta", "1.0.0-rc") == -1
        assert compare_versions("1.0.0-RC", "1.0.0-rc") == -1

    def test_numeric_prerelease_parts(self):
        """Test numeric pre-release parts comparison."""
        assert compare_versions("1.0.0-1", "1.0.0-2") == -1
        assert compare_versions("1.0.0-10", "1.0.0-2") == 1

    def test_leading_zero_identifiers_equal(self):
        """Test that 02 and 2 have equal precedence."""
        assert compare_versions("1.0.0-02", "1.0.0-2") == 0

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0
        assert compare_versions("1.0.0-rc.1+a", "1.0.0-rc.1+b") == 0

    def test_prefix_ignored(self):
        """Test that the v prefix does not affect precedence."""
        assert compare_versions("v1.2.3", "1.2.3") == 0

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    @pytest.mark.parametrize(
        "invalid",
        [Version(1, 0, 0, "a..b"), Version(-1, 0, 0), Version(1, 0, 0, "", "bad!")],
    )
    def test_invalid_version_object(self, invalid):
        """Test that Version arguments are validated before comparing."""
        with pytest.raises(ValidationError):
            compare_versions(invalid, Version(1, 0, 0))
        with pytest.raises(ValidationError):
            compare_versions(Version(1, 0, 0), invalid)
        with pytest.raises(ValidationError):
            version_key(invalid)

    def test_invalid_string(self):
        """Test that unparsable strings raise."""
        with pytest.raises(MalformedVersionError):
            compare_versions("1.0", "1.0.0")


class TestPrereleaseOrdering:
    """Tests for the SemVer 2.0.0 precedence example chain."""

    def test_full_prerelease_chain(self):
        """Test full pre-release ordering chain."""
        versions = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for i in range(len(versions) - 1):
            assert (
                compare_versions(versions[i], versions[i + 1]) == -1
            ), f"{versions[i]} should be < {versions[i + 1]}"


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_with_prerelease(self):
        """Test sorting versions with pre-releases."""
        versions = ["1.0.0", "1.0.0-alpha", "1.0.0-alpha.1", "1.0.0-1", "1.0.0-rc"]
        assert sorted(versions, key=version_key) == [
            "1.0.0-1",
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-rc",
            "1.0.0",
        ]

    def test_build_does_not_affect_key(self):
        """Test that build metadata is not part of the key."""
        assert version_key("1.0.0+a") == version_key("1.0.0+b")


class TestSortAndMax:
    """Tests for sort_versions and max_version."""

    def test_sort_versions(self):
        """Test that sort_versions parses and orders."""
        result = sort_versions(["v2.0.0", "1.0.0-rc.1", "1.0.0"])
        assert [str(v) for v in result] == ["1.0.0-rc.1", "1.0.0", "2.0.0"]

    def test_sort_versions_reverse(self):
        """Test descending order."""
        result = sort_versions(["1.0.0", "2.0.0"], reverse=True)
        assert result == [Version(2, 0, 0), Version(1, 0, 0)]

    def test_max_version(self):
        """Test picking the newest version."""
        assert max_version(["1.0.0", "1.0.1-rc.1", "1.0.0+build"]) == Version(1, 0, 1, "rc.1")

    def test_max_version_empty(self):
        """Test that an empty input raises ValueError."""
        with pytest.raises(ValueError):
            max_version([])
