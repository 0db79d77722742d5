# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

from functools import cmp_to_key

import pytest

from semverkit import (
    ParseError,
    Version,
    compare_identifiers,
    compare_prerelease,
    compare_versions,
    parse_strict_or_fail,
    version_key,
)

# Canonical ordering example from semver.org section 11
SEMVER_ORG_CHAIN = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
]


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_core_precedence_chain(self):
        """Test 1.2.3 < 1.2.4 < 1.3.0 < 2.0.0."""
        chain = ["1.2.3", "1.2.4", "1.3.0", "2.0.0"]
        for lower, higher in zip(chain, chain[1:]):
            assert compare_versions(lower, higher) == -1

    def test_numeric_not_lexical(self):
        """Test that components are compared numerically."""
        assert compare_versions("10.0.0", "9.0.0") == 1
        assert compare_versions("1.10.0", "1.9.0") == 1
        assert compare_versions("1.0.10", "1.0.9") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0
        assert compare_versions("1.0.0-rc.1+a", "1.0.0-rc.1+b") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(Version.of(1), Version.of(2)) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_strict_or_fail("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        """Test that invalid strings raise ParseError."""
        with pytest.raises(ParseError):
            compare_versions("1.0", "1.0.0")


class TestPrereleaseOrdering:
    """Tests for pre-release precedence."""

    def test_semver_org_chain(self):
        """Test the canonical SemVer pre-release ordering chain."""
        for lower, higher in zip(SEMVER_ORG_CHAIN, SEMVER_ORG_CHAIN[1:]):
            assert compare_versions(lower, higher) == -1, f"{lower} should be < {higher}"
            assert compare_versions(higher, lower) == 1, f"{higher} should be > {lower}"

    def test_numeric_prerelease_parts(self):
        """Test numeric pre-release parts comparison."""
        assert compare_versions("1.0.0-1", "1.0.0-2") == -1
        assert compare_versions("1.0.0-10", "1.0.0-2") == 1

    def test_numeric_lower_than_alphanumeric(self):
        """Test that numeric identifiers lose to alphanumeric ones."""
        assert compare_versions("1.0.0-1", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-999", "1.0.0-a") == -1
        assert compare_versions("1.0.0-alpha.99", "1.0.0-alpha.beta") == -1

    def test_longer_sequence_wins(self):
        """Test that a larger set of equal-prefix fields has higher precedence."""
        assert compare_versions("1.0.0-alpha", "1.0.0-alpha.1") == -1
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha") == 1

    def test_ascii_ordering(self):
        """Test that alphanumeric identifiers compare in ASCII order."""
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0--", "1.0.0-0a") == -1
        assert compare_versions("1.0.0-rc", "1.0.0-rc-1") == -1

    def test_mixed_identifiers_are_not_numeric(self):
        """Test that identifiers with digits and letters compare lexically."""
        assert compare_versions("1.0.0-alpha10", "1.0.0-alpha9") == -1
        assert compare_versions("1.0.0-1a", "1.0.0-1") == 1


class TestCompareIdentifiers:
    """Tests for the identifier sequence comparator."""

    def test_equal(self):
        """Test equal sequences."""
        assert compare_identifiers(["alpha", "1"], ("alpha", "1")) == 0

    def test_empty_sequences(self):
        """Test that an empty sequence is lower than a non-empty one."""
        assert compare_identifiers([], []) == 0
        assert compare_identifiers([], ["0"]) == -1

    def test_huge_numbers(self):
        """Test numeric comparison beyond machine integer ranges."""
        assert compare_identifiers(["18446744073709551616"], ["18446744073709551615"]) == 1

    def test_numbers_past_int_conversion_limit(self):
        """Test numeric identifiers with thousands of digits."""
        small, large = "1" * 5000, "2" * 5000
        longer = "1" * 5001
        assert compare_identifiers([small], [large]) == -1
        assert compare_identifiers([large], [small]) == 1
        assert compare_identifiers([large], [longer]) == -1
        assert compare_identifiers([small], [small]) == 0
        assert compare_identifiers([longer], ["alpha"]) == -1

    def test_compare_prerelease_absence(self):
        """Test that an absent pre-release outranks a present one."""
        assert compare_prerelease(None, None) == 0
        assert compare_prerelease(None, ["alpha"]) == 1
        assert compare_prerelease(["alpha"], None) == -1
        assert compare_prerelease((), None) == 0


class TestVersionOperators:
    """Tests for the relational predicates and operators on Version."""

    def test_predicates(self):
        """Test the derived predicates."""
        low = Version.of(1, 0, 0, "rc.1")
        high = Version.of(1, 0, 0)
        assert high.greater_than(low)
        assert high.greater_than_or_equal_to(low)
        assert low.less_than(high)
        assert low.less_than_or_equal_to(high)
        assert not low.equal_to(high)
        assert high.compare_to(low) == 1
        assert low.compare_to(high) == -1

    def test_operators(self):
        """Test rich comparison operators."""
        assert Version.of(1, 2, 3) < Version.of(1, 2, 4)
        assert Version.of(2) > Version.of(1, 99, 99)
        assert Version.of(1, 0, 0, build="a") <= Version.of(1, 0, 0, build="b")
        assert Version.of(1, 0, 0, build="a") >= Version.of(1, 0, 0, build="b")

    def test_compare_with_other_type(self):
        """Test that ordering against non-versions is unsupported."""
        with pytest.raises(TypeError):
            Version.of(1) < "1.0.0"  # type: ignore
        with pytest.raises(TypeError):
            Version.of(1).compare_to("1.0.0")  # type: ignore

    def test_sorted(self):
        """Test sorting Version objects with the built-in ordering."""
        versions = [parse_strict_or_fail(text) for text in reversed(SEMVER_ORG_CHAIN)]
        assert [str(v) for v in sorted(versions)] == SEMVER_ORG_CHAIN


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1", "10.0.0", "9.0.0"]
        assert sorted(versions, key=version_key) == [
            "1.0.0",
            "1.0.1",
            "1.1.0",
            "2.0.0",
            "9.0.0",
            "10.0.0",
        ]

    def test_sorting_semver_org_chain(self):
        """Test that the key reproduces the canonical ordering."""
        shuffled = SEMVER_ORG_CHAIN[3:] + SEMVER_ORG_CHAIN[:3]
        assert sorted(shuffled, key=version_key) == SEMVER_ORG_CHAIN

    def test_sorting_mixed(self):
        """Test sorting mixed versions."""
        versions = [
            "2.0.0",
            "1.0.0-alpha",
            "1.0.0",
            "1.1.0-beta",
            "1.0.0-rc",
        ]
        assert sorted(versions, key=version_key) == [
            "1.0.0-alpha",
            "1.0.0-rc",
            "1.0.0",
            "1.1.0-beta",
            "2.0.0",
        ]

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_strict_or_fail("2.0.0"), parse_strict_or_fail("1.0.0")]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions[0].major == 1
        assert sorted_versions[1].major == 2

    def test_build_ignored(self):
        """Test that versions differing only in build share a key."""
        assert version_key("1.0.0+a") == version_key("1.0.0+b")

    def test_huge_numeric_identifiers(self):
        """Test keys for numeric identifiers with thousands of digits."""
        versions = [
            "1.0.0-" + "1" * 5001,
            "1.0.0-alpha",
            "1.0.0-" + "2" * 5000,
            "1.0.0-" + "1" * 5000,
        ]
        expected = [versions[3], versions[2], versions[0], versions[1]]
        assert sorted(versions, key=version_key) == expected
        assert sorted(versions, key=cmp_to_key(compare_versions)) == expected
        assert parse_strict_or_fail(versions[2]) < parse_strict_or_fail(versions[0])


class TestTransitivity:
    """Tests for comparison transitivity."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        for i, a in enumerate(SEMVER_ORG_CHAIN):
            for c in SEMVER_ORG_CHAIN[i + 1 :]:
                assert compare_versions(a, c) == -1

    def test_antisymmetry(self):
        """Test that comparison is antisymmetric: if a < b, then b > a."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        for v in ["1.0.0", "1.0.0-alpha", "1.0.0+build"]:
            assert compare_versions(v, v) == 0
