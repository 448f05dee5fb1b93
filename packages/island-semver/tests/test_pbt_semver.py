# SPDX-License-Identifier: MIT
"""Property-based tests for semantic versions.

These tests validate:
- Property 1: Canonical string round trip
- Property 2: Parser totality (never raises)
- Property 3: Precedence is a strict total order
- Property 4: Build metadata never affects precedence
- Property 5: Sort key agrees with precedence
- Property 6: Equality and hashing are structural
"""

import dataclasses

from hypothesis import given, settings, strategies as st

from island_semver import (
    NumericIdentifier,
    SemanticVersion,
    compare_identifiers,
    compare_precedence,
    decode_version,
    encode_version,
    parse_version,
    precedence_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

# Core version numbers, including values wider than 64 bits
core_number = st.one_of(
    st.integers(min_value=0, max_value=1000),
    st.integers(min_value=0, max_value=2**80),
)

# Numeric prerelease identifiers: "0" or no leading zero, possibly very long
numeric_identifier = st.one_of(
    st.just("0"),
    st.from_regex(r"[1-9][0-9]{0,40}", fullmatch=True),
)

# Alphanumeric identifiers: at least one letter or hyphen
alphanumeric_identifier = st.from_regex(
    r"[0-9A-Za-z-]{0,6}[A-Za-z-][0-9A-Za-z-]{0,6}", fullmatch=True
)

prerelease_identifier = st.one_of(numeric_identifier, alphanumeric_identifier)

# Build metadata identifiers have no leading-zero rule
build_identifier = st.from_regex(r"[0-9A-Za-z-]{1,10}", fullmatch=True)

semantic_versions = st.builds(
    SemanticVersion,
    core_number,
    core_number,
    core_number,
    st.lists(prerelease_identifier, max_size=4),
    st.lists(build_identifier, max_size=3),
)

# Versions drawn from a small space so that ties are common
small_versions = st.builds(
    SemanticVersion,
    st.integers(min_value=0, max_value=2),
    st.integers(min_value=0, max_value=2),
    st.integers(min_value=0, max_value=2),
    st.lists(st.sampled_from(["0", "1", "2", "10", "a", "b", "alpha", "-"]), max_size=3),
    st.lists(st.sampled_from(["x", "001"]), max_size=1),
)

# Text built from grammar characters, to reach deep into the parser
version_like_text = st.text(alphabet="0123456789.-+aZ!", max_size=20)


def _sign(a, b) -> int:
    return (a > b) - (a < b)


# =============================================================================
# Property 1: Canonical string round trip
# =============================================================================


class TestRoundTrip:
    """Property 1: parse(str(v)) == v for every valid version."""

    @given(version=semantic_versions)
    @settings(max_examples=200)
    def test_parse_inverts_str(self, version: SemanticVersion):
        """Property 1: The canonical form parses back to an equal version."""
        assert parse_version(str(version)) == version

    @given(version=semantic_versions)
    @settings(max_examples=100)
    def test_decode_inverts_encode(self, version: SemanticVersion):
        """Property 1: decode_version inverts encode_version."""
        assert decode_version(encode_version(version)) == version

    @given(version=semantic_versions)
    @settings(max_examples=100)
    def test_separators_only_when_needed(self, version: SemanticVersion):
        """Property 1: '-' and '+' appear in the canonical form only with identifiers."""
        text = str(version)
        core = f"{version.major}.{version.minor}.{version.patch}"
        assert text.startswith(core)
        rest = text[len(core):]
        assert rest.startswith("-") == bool(version.prerelease_identifiers)
        assert ("+" in rest) == bool(version.build_metadata_identifiers)


# =============================================================================
# Property 2: Parser totality
# =============================================================================


class TestParserTotality:
    """Property 2: The parser returns a version or None and never raises."""

    @given(text=st.text(max_size=30))
    @settings(max_examples=200)
    def test_arbitrary_text(self, text: str):
        """Property 2: Arbitrary text never raises."""
        result = parse_version(text)
        assert result is None or isinstance(result, SemanticVersion)

    @given(text=version_like_text)
    @settings(max_examples=300)
    def test_grammar_characters(self, text: str):
        """Property 2: Accepted strings re-serialize to an equivalent version."""
        result = parse_version(text)
        if result is not None:
            assert parse_version(str(result)) == result
            assert "!" not in text


# =============================================================================
# Property 3: Precedence is a strict total order
# =============================================================================


class TestTotalOrder:
    """Property 3: Precedence is antisymmetric, transitive and total."""

    @given(a=small_versions, b=small_versions)
    @settings(max_examples=300)
    def test_antisymmetry(self, a: SemanticVersion, b: SemanticVersion):
        """Property 3: compare(a, b) == -compare(b, a)."""
        assert compare_precedence(a, b) == -compare_precedence(b, a)

    @given(a=small_versions, b=small_versions)
    @settings(max_examples=300)
    def test_totality(self, a: SemanticVersion, b: SemanticVersion):
        """Property 3: Exactly one of a < b, a ~ b, a > b holds."""
        outcomes = [a < b, compare_precedence(a, b) == 0, a > b]
        assert outcomes.count(True) == 1
        assert (a <= b) == (a < b or compare_precedence(a, b) == 0)
        assert (a >= b) == (a > b or compare_precedence(a, b) == 0)

    @given(a=small_versions, b=small_versions, c=small_versions)
    @settings(max_examples=300)
    def test_transitivity(self, a: SemanticVersion, b: SemanticVersion, c: SemanticVersion):
        """Property 3: a <= b and b <= c implies a <= c."""
        if a <= b and b <= c:
            assert a <= c
        if a < b and b < c:
            assert a < c

    @given(a=numeric_identifier, b=numeric_identifier)
    @settings(max_examples=200)
    def test_numeric_identifiers_match_integers(self, a: str, b: str):
        """Property 3: Numeric identifiers order like the integers they spell."""
        assert compare_identifiers(NumericIdentifier(a), NumericIdentifier(b)) == _sign(int(a), int(b))

    @given(version=semantic_versions, identifier=prerelease_identifier)
    @settings(max_examples=100)
    def test_release_outranks_prerelease(self, version: SemanticVersion, identifier: str):
        """Property 3: Any pre-release is below the release with the same core."""
        release = dataclasses.replace(version, prerelease_identifiers=())
        prerelease = dataclasses.replace(version, prerelease_identifiers=(identifier,))
        assert prerelease < release


# =============================================================================
# Property 4: Build metadata never affects precedence
# =============================================================================


class TestBuildMetadataInvariance:
    """Property 4: Replacing build metadata leaves precedence unchanged."""

    @given(version=semantic_versions, build=st.lists(build_identifier, max_size=3))
    @settings(max_examples=200)
    def test_equal_precedence(self, version: SemanticVersion, build: list[str]):
        """Property 4: A version is precedence-equal to itself with other build metadata."""
        other = dataclasses.replace(version, build_metadata_identifiers=build)
        assert compare_precedence(version, other) == 0
        assert version <= other and version >= other
        assert (version == other) == (tuple(build) == version.build_metadata_identifiers)


# =============================================================================
# Property 5: Sort key agrees with precedence
# =============================================================================


class TestPrecedenceKey:
    """Property 5: precedence_key orders exactly like compare_precedence."""

    @given(a=small_versions, b=small_versions)
    @settings(max_examples=300)
    def test_small_space(self, a: SemanticVersion, b: SemanticVersion):
        """Property 5: Key order matches precedence on a dense space."""
        assert _sign(precedence_key(a), precedence_key(b)) == compare_precedence(a, b)

    @given(a=semantic_versions, b=semantic_versions)
    @settings(max_examples=200)
    def test_wide_space(self, a: SemanticVersion, b: SemanticVersion):
        """Property 5: Key order matches precedence on arbitrary versions."""
        assert _sign(precedence_key(a), precedence_key(b)) == compare_precedence(a, b)

    @given(versions=st.lists(small_versions, max_size=10))
    @settings(max_examples=100)
    def test_sorted_agrees(self, versions: list[SemanticVersion]):
        """Property 5: Sorting by key and by operators give the same precedence order."""
        by_key = sorted(versions, key=precedence_key)
        by_operator = sorted(versions)
        assert [precedence_key(x) for x in by_key] == [precedence_key(x) for x in by_operator]
        for lower, higher in zip(by_key, by_key[1:]):
            assert lower <= higher


# =============================================================================
# Property 6: Equality and hashing are structural
# =============================================================================


class TestStructuralEquality:
    """Property 6: Equality compares every field; equal versions hash equally."""

    @given(a=small_versions, b=small_versions)
    @settings(max_examples=300)
    def test_equality_is_structural(self, a: SemanticVersion, b: SemanticVersion):
        """Property 6: a == b exactly when every field matches."""
        assert (a == b) == (dataclasses.astuple(a) == dataclasses.astuple(b))
        if a == b:
            assert hash(a) == hash(b)
            assert compare_precedence(a, b) == 0

    @given(version=semantic_versions)
    @settings(max_examples=100)
    def test_reparsed_hash(self, version: SemanticVersion):
        """Property 6: A re-parsed version hashes like the version it came from."""
        assert hash(parse_version(str(version))) == hash(version)
