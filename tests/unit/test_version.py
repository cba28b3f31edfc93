"""Tests for semantic version parsing and bumping."""

from __future__ import annotations

import pytest

from pr_changelog.core.version import (
    BumpType,
    SemanticVersion,
    bump_version,
    max_bump,
    parse_version,
)
from pr_changelog.exceptions import InvalidVersionFormat


class TestParseVersion:
    """Tests for parse_version()."""

    def test_parse_plain(self):
        """Parse MAJOR.MINOR.PATCH."""
        version = parse_version("1.2.3")
        assert (version.major, version.minor, version.patch) == (1, 2, 3)
        assert version.prefix == ""

    def test_parse_with_v_prefix(self):
        """A leading v is accepted and kept."""
        version = parse_version("v1.2.3")
        assert version == SemanticVersion(1, 2, 3)
        assert str(version) == "v1.2.3"

    def test_parse_strips_whitespace(self):
        """Surrounding whitespace is ignored."""
        assert parse_version("  2.0.0\n") == SemanticVersion(2, 0, 0)

    def test_zero_components_allowed(self):
        """A single 0 is canonical."""
        assert str(parse_version("0.0.0")) == "0.0.0"
        assert str(parse_version("10.0.100")) == "10.0.100"

    @pytest.mark.parametrize(
        "value",
        [
            "v1.2",
            "1.2",
            "1",
            "",
            "1.2.3.4",
            "1.2.x",
            "a.b.c",
            "1.2.3-rc.1",
            "1..3",
            "-1.2.3",
            "vv1.2.3",
            "٣.1.1",
            "01.2.3",
            "1.02.3",
            "1.2.03",
            "v01.02.003",
        ],
    )
    def test_invalid_versions_raise(self, value: str):
        """Anything but three canonical dotted integers is rejected."""
        with pytest.raises(InvalidVersionFormat):
            parse_version(value)

    def test_error_keeps_value(self):
        """The rejected string is available on the exception."""
        with pytest.raises(InvalidVersionFormat) as exc_info:
            parse_version("v1.2")
        assert exc_info.value.value == "v1.2"

    def test_classmethod_parse(self):
        """SemanticVersion.parse delegates to parse_version."""
        assert SemanticVersion.parse("0.1.0") == SemanticVersion(0, 1, 0)


class TestSemanticVersion:
    """Tests for SemanticVersion."""

    def test_str(self):
        """Canonical string form."""
        assert str(SemanticVersion(10, 0, 7)) == "10.0.7"

    def test_ordering_ignores_prefix(self):
        """Comparison uses the numbers only."""
        assert SemanticVersion(1, 2, 3, prefix="v") == SemanticVersion(1, 2, 3)
        assert SemanticVersion(1, 2, 3) < SemanticVersion(1, 10, 0)

    def test_negative_components_rejected(self):
        """Components must be non-negative."""
        with pytest.raises(InvalidVersionFormat):
            SemanticVersion(1, -1, 0)


class TestBump:
    """Tests for SemanticVersion.bump() and bump_version()."""

    def test_bump_major(self):
        assert SemanticVersion(2, 0, 0).bump(BumpType.MAJOR) == SemanticVersion(3, 0, 0)

    def test_bump_major_resets_lower(self):
        assert SemanticVersion(1, 4, 9).bump(BumpType.MAJOR) == SemanticVersion(2, 0, 0)

    def test_bump_minor(self):
        assert SemanticVersion(1, 2, 3).bump(BumpType.MINOR) == SemanticVersion(1, 3, 0)

    def test_bump_patch(self):
        assert SemanticVersion(1, 2, 3).bump(BumpType.PATCH) == SemanticVersion(1, 2, 4)

    def test_bump_none_returns_same(self):
        """NONE returns the input unchanged."""
        version = SemanticVersion(1, 2, 3)
        assert version.bump(BumpType.NONE) is version

    def test_bump_version_string(self):
        """bump_version works on strings."""
        assert bump_version("1.2.3", BumpType.MINOR) == "1.3.0"

    def test_bump_keeps_prefix(self):
        """The v prefix survives a bump."""
        assert bump_version("v1.2.3", BumpType.PATCH) == "v1.2.4"

    def test_bump_version_invalid(self):
        """Invalid input raises InvalidVersionFormat."""
        with pytest.raises(InvalidVersionFormat):
            bump_version("v1.2", BumpType.MAJOR)


class TestBumpType:
    """Tests for BumpType ordering."""

    def test_severity_order(self):
        assert (
            BumpType.NONE.severity
            < BumpType.PATCH.severity
            < BumpType.MINOR.severity
            < BumpType.MAJOR.severity
        )

    def test_max_bump(self):
        assert max_bump(BumpType.PATCH, BumpType.MAJOR, BumpType.MINOR) == BumpType.MAJOR

    def test_max_bump_empty(self):
        assert max_bump() == BumpType.NONE
