"""Tests for specifier ordering and latest-version selection."""

import pytest

from versionroute.versioning.comparator import compare_versions
from versionroute.versioning.parser import parse_version
from versionroute.versioning.resolver import find_latest_version


class TestCompareVersions:
    """Tests for compare_versions."""

    @pytest.mark.parametrize("left,right,expected", [
        ("1.2.1", "1.3.1", -1),
        ("1.3.1", "1.2.1", 1),
        ("2.0.0", "1.22.0", 1),
        ("1.22.0", "2.3.1", -1),
        ("10.0.0", "9.0.0", 1),
        ("1.2.3", "1.2.3", 0),
        ("^1.2.3", "~1.2.3", 0),
        ("2.3.1", "~2.3.0", 1),
        ("1.0.0", "1.0", 1),
    ])
    def test_ordering(self, left, right, expected):
        """Components are compared numerically from major to patch."""
        assert compare_versions(left, right) == expected

    def test_missing_minor_defaults_to_zero(self):
        """An absent minor compares as 0."""
        assert compare_versions("1", "1.1.0") == -1
        assert compare_versions("2", "1.9.9") == 1

    def test_missing_patch_is_not_defaulted(self):
        """An absent patch behaves like a non-numeric component."""
        assert compare_versions("1.0", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0") == 1
        # Neither side has a patch: the left side wins.
        assert compare_versions("1", "1") == 1

    def test_non_numeric_right_side_loses(self):
        """A non-numeric component makes the other side win."""
        assert compare_versions("1.0.0", "a.0.0") == 1
        assert compare_versions("a.0.0", "1.0.0") == -1
        assert compare_versions("9.0.0", "9.x.0") == 1
        assert compare_versions("0.0.1", "9.x.0") == -1
        # Both non-numeric: left wins
        assert compare_versions("a", "b") == 1
        assert compare_versions("b", "a") == 1

    def test_accepts_parsed_identifiers(self):
        """Parsed identifiers compare like their strings."""
        assert compare_versions(parse_version("~1.4.4"), "1.22.0") == -1

    def test_consistent_over_full_versions(self):
        """Over full numeric versions the order is antisymmetric and transitive."""
        versions = ["0.0.1", "1.2.1", "^1.2.2", "1.10.0", "~2.0.0", "2.0.1", "10.0.0"]
        for a in versions:
            for b in versions:
                if a != b:
                    assert compare_versions(a, b) == -compare_versions(b, a)
        for i, a in enumerate(versions):
            for b in versions[i + 1:]:
                assert compare_versions(a, b) == -1


class TestFindLatestVersion:
    """Tests for find_latest_version."""

    def test_picks_highest(self):
        """The highest version is returned."""
        assert find_latest_version(["1.2.1", "1.3.1"]) == "1.3.1"

    def test_mixed_specifiers(self):
        """Prefixes are ignored for ordering."""
        specifiers = ["2.0.2", "~2.3.0", "1.2.1", "2.0.0", "~1.4.4", "1.22.0", "2.3.1"]
        assert find_latest_version(specifiers) == "2.3.1"

    def test_last_among_equals_in_input_order(self):
        """Equal versions keep input order, so the last one wins."""
        assert find_latest_version(["^1.2.3", "~1.2.3", "1.2.3"]) == "1.2.3"
        assert find_latest_version(["1.2.3", "~1.2.3", "^1.2.3"]) == "^1.2.3"

    def test_accepts_mapping_keys(self):
        """Mapping key views are accepted."""
        assert find_latest_version({"1": None, "2": None}.keys()) == "2"

    def test_empty(self):
        """No specifiers means no latest version."""
        assert find_latest_version([]) is None
