"""
Tests for packver.versioning.version module.

Tests parsing and ordering including:
- Wildcard handling
- Numeric round trips
- Maturity keyword ordering
- Zero padding of components and parts
- Noise and invalid-segment errors
- VersionPart/Version invariants
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
import itertools

import pytest

from packver.exceptions import BadVersionString, PackverError
from packver.versioning import NULL_PART, Version, VersionPart, parse_version


def v(text: str) -> Version:
    return parse_version(text)


class TestWildcard:
    """Tests for the "any version" value."""

    @pytest.mark.parametrize("text", ["", "*"])
    def test_wildcard_parses(self, text):
        """Test that empty text and '*' both yield the wildcard."""
        parsed = v(text)
        assert parsed.parts == ()
        assert parsed.text == "*"
        assert parsed.is_wildcard
        assert str(parsed) == ""

    def test_wildcard_compares_as_zero(self):
        """Test that the wildcard is the smallest value under comparison."""
        assert v("*") == v("0")
        assert v("*") == v("0.0.0")
        assert v("*") < v("0.0.1")
        assert v("*") <= v("1")
        assert v("2") > v("*")
        assert v("2") >= v("*")

    def test_wildcard_constructor(self):
        """Test Version.wildcard()."""
        assert Version.wildcard() == v("*")
        assert Version.wildcard().text == "*"


class TestParse:
    """Tests for parse_version."""

    def test_numeric_single_part(self):
        """Test that a dotted numeric string is one part."""
        parsed = v("1.2.3")
        assert parsed.parts == (VersionPart((1, 2, 3)),)
        assert parsed.parts[0].components == (1, 2, 3)
        assert parsed.text == "1.2.3"

    @pytest.mark.parametrize("text", ["1.2.3", "0.1", "2024.10.19", "7"])
    def test_numeric_round_trip(self, text):
        """Test that re-parsing the formatted part gives an equal Version."""
        parsed = v(text)
        assert v(str(parsed.parts[0])) == parsed

    def test_original_text_kept(self):
        """Test that text is the unmodified input, not the normalized form."""
        assert v("2.0-Beta_3").text == "2.0-Beta_3"

    def test_hyphen_segments_become_parts(self):
        """Test that each accepted segment becomes one part."""
        parsed = v("1.0.0-rc.1")
        assert parsed.parts == (VersionPart((1, 0, 0)), VersionPart((2, 1)))
        assert str(parsed) == "1.0.0.2.1"

    def test_commit_ref_ignored(self):
        """Test that a commit-ref-like segment is dropped."""
        assert v("1.0.0-g1a2b3c") == v("1.0.0")
        assert v("1.0.0-g1a2b3c").parts == (VersionPart((1, 0, 0)),)

    def test_letters_only_fails(self):
        """Test that a letters-only string raises BadVersionString."""
        with pytest.raises(BadVersionString) as excinfo:
            v("abcdef")
        assert excinfo.value.text == "abcdef"
        assert "abcdef" in str(excinfo.value)

    def test_error_keeps_original_text(self):
        """Test that the error message carries the raw, un-normalized input."""
        with pytest.raises(BadVersionString, match="Final-Build"):
            v("Final-Build")

    def test_invalid_characters_fail(self):
        """Test that segments with other characters are dropped, then fail."""
        with pytest.raises(BadVersionString):
            v("1.0~x")

    def test_error_hierarchy(self):
        """Test that BadVersionString is both a PackverError and a ValueError."""
        with pytest.raises(PackverError):
            v("abcdef")
        with pytest.raises(ValueError):
            v("abcdef")

    def test_classmethod_parse(self):
        """Test Version.parse delegates to parse_version."""
        assert Version.parse("1.2") == v("1.2")


class TestOrdering:
    """Tests for Version comparison."""

    def test_basic(self):
        """Test the basic ordering examples."""
        assert v("1.2.3") < v("1.3.0")
        assert v("1.2.3") == v("1.2.3")
        assert v("1.10") > v("1.9")

    def test_zero_padding(self):
        """Test that trailing zeros and trailing zero parts do not matter."""
        assert v("1.2") == v("1.2.0")
        assert v("1") == v("1-0")
        assert hash(v("1.2")) == hash(v("1.2.0"))
        assert len({v("1.2"), v("1.2.0"), v("1.2.0-0")}) == 1

    def test_maturity_order(self):
        """Test alpha < beta < rc < release for the same base version."""
        alpha, beta, rc, release = (
            v("1.0-alpha"),
            v("1.0-beta"),
            v("1.0-rc"),
            v("1.0-release"),
        )
        assert alpha < beta < rc < release

    def test_rc_pre_snapshot_rank_equal(self):
        """Test that pre, rc and snapshot share one rank."""
        assert v("1.0-rc") == v("1.0-pre") == v("1.0-snapshot")

    def test_alpha_equals_bare_version(self):
        """Test that alpha encodes to 0 and so pads away against the bare version."""
        assert v("1.0-alpha") == v("1.0")

    def test_case_insensitive(self):
        """Test that keyword and letter case do not matter."""
        assert v("1.0-RC1") == v("1.0-rc1")
        assert v("1.0-RC1").parts[1] == VersionPart((21,))

    def test_concatenated_letter_encoding(self):
        """Test that '1.9z' (1, 926) sorts above '1.100' (1, 100)."""
        assert v("1.9z") > v("1.100")

    def test_total_preorder(self):
        """Test trichotomy and transitivity over a sample."""
        sample = [
            v(t)
            for t in ["*", "0.1", "1", "1.0.0", "1.0-beta", "1.0-rc2", "1.2", "1.10", "2-alpha"]
        ]
        for a, b in itertools.product(sample, repeat=2):
            assert [a < b, a == b, a > b].count(True) == 1
            assert (a <= b) == (a < b or a == b)
            assert (a >= b) == (a > b or a == b)
        for a, b, c in itertools.product(sample, repeat=3):
            if a < b and b < c:
                assert a < c

    def test_sorting(self):
        """Test that versions sort with sorted()."""
        texts = ["1.10", "1.2", "2.0-beta", "1.2-rc", "0.9"]
        assert [p.text for p in sorted(v(t) for t in texts)] == [
            "0.9",
            "1.2",
            "1.2-rc",
            "1.10",
            "2.0-beta",
        ]

    def test_compare_with_other_types(self):
        """Test that ordering against non-Versions raises TypeError."""
        assert v("1") != "1"
        with pytest.raises(TypeError):
            v("1") < "1"  # noqa: B015


class TestVersionPart:
    """Tests for VersionPart."""

    def test_null_equivalence(self):
        """Test that empty and all-zero parts equal NULL_PART."""
        assert VersionPart(()) == NULL_PART
        assert VersionPart((0, 0, 0)) == NULL_PART
        assert hash(VersionPart(())) == hash(NULL_PART)

    def test_ordering(self):
        """Test that the most significant difference decides."""
        assert VersionPart((1, 2)) < VersionPart((1, 10))
        assert VersionPart((2,)) > VersionPart((1, 99))
        assert VersionPart((1, 2)) <= VersionPart((1, 2, 0))
        assert VersionPart((1, 2, 1)) > VersionPart((1, 2))
        assert VersionPart((1, 2, 1)) >= VersionPart((1, 2))

    def test_format(self):
        """Test that formatting shows the stored components."""
        assert str(VersionPart((1, 2, 0))) == "1.2.0"
        assert str(VersionPart(())) == ""

    def test_accepts_lists(self):
        """Test that components are stored as a tuple."""
        assert VersionPart([1, 2]).components == (1, 2)

    def test_rejects_negative(self):
        """Test that negative components fail immediately."""
        with pytest.raises(ValueError):
            VersionPart((1, -1))

    def test_rejects_non_int(self):
        """Test that non-integer components fail immediately."""
        with pytest.raises(TypeError):
            VersionPart((1, "2"))  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            VersionPart((True,))

    def test_immutable(self):
        """Test that parts and versions cannot be reassigned."""
        part = VersionPart((1,))
        with pytest.raises(FrozenInstanceError):
            part.components = (2,)  # type: ignore[misc]
        with pytest.raises(FrozenInstanceError):
            v("1.0").text = "2.0"  # type: ignore[misc]


class TestVersionInvariant:
    """Tests for the text/parts wildcard invariant."""

    def test_non_wildcard_needs_parts(self):
        """Test that non-'*' text without parts is rejected."""
        with pytest.raises(ValueError):
            Version("1.0", ())

    def test_wildcard_must_be_empty(self):
        """Test that '*' text with parts is rejected."""
        with pytest.raises(ValueError):
            Version("*", (NULL_PART,))

    def test_parts_must_be_version_parts(self):
        """Test that raw tuples are not accepted as parts."""
        with pytest.raises(TypeError):
            Version("1", ((1,),))  # type: ignore[arg-type]
