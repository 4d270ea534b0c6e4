"""Tests for devdoctor.core.semver module."""

from __future__ import annotations

import pytest

from devdoctor.core.errors import ParseError
from devdoctor.core.semver import SemVersion, VersionRequirement


def v(text: str) -> SemVersion:
    return SemVersion.parse(text)


class TestSemVersionParse:
    """Tests for SemVersion.parse / try_parse."""

    def test_three_parts(self) -> None:
        assert v("16.9.0") == SemVersion(16, 9, 0)

    def test_missing_parts_are_zero(self) -> None:
        assert v("16") == SemVersion(16, 0, 0)
        assert v("16.9") == SemVersion(16, 9, 0)

    def test_four_parts(self) -> None:
        version = v("16.11.31729.503")
        assert version.revision == 503
        assert str(version) == "16.11.31729.503"

    def test_prerelease_and_metadata(self) -> None:
        version = v("17.0.0-pre.7.0+31825.309")
        assert version.release_labels == ("pre", "7", "0")
        assert version.metadata == "31825.309"

    def test_str_drops_metadata(self) -> None:
        assert str(v("16.11.5+31729.503")) == "16.11.5"
        assert str(v("17.0.0-pre.7.0+31825.309")) == "17.0.0-pre.7.0"

    def test_surrounding_whitespace_ignored(self) -> None:
        assert v("  16.9.0\n") == SemVersion(16, 9, 0)

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "16.", "16.9.0.1.2", "v16.9.0", "16.9.0-", "16.9.0+", "16.9.0-a..b", "1.2.x"],
    )
    def test_invalid(self, text: str) -> None:
        assert SemVersion.try_parse(text) is None
        with pytest.raises(ParseError):
            SemVersion.parse(text)

    def test_only_ascii_digits(self) -> None:
        # Arabic-Indic digits for "16.9.0"
        assert SemVersion.try_parse("١٦.٩.٠") is None
        assert SemVersion.try_parse("17.0.0-pre.١") is None


class TestSemVersionOrdering:
    """Precedence rules."""

    def test_numeric_parts(self) -> None:
        assert v("16.8.9") < v("16.9.0") < v("16.10.0") < v("17.0.0")

    def test_release_above_prerelease(self) -> None:
        assert v("17.0.0-preview") < v("17.0.0")
        assert v("16.11.0") < v("17.0.0-preview")

    def test_numeric_labels_compare_numerically(self) -> None:
        assert v("17.0.0-pre.2") < v("17.0.0-pre.10")

    def test_numeric_labels_below_alphanumeric(self) -> None:
        assert v("17.0.0-1") < v("17.0.0-alpha")

    def test_shorter_label_list_first(self) -> None:
        assert v("17.0.0-pre") < v("17.0.0-pre.1")

    def test_labels_case_insensitive(self) -> None:
        assert v("17.0.0-Preview.1") == v("17.0.0-preview.1")

    def test_metadata_ignored(self) -> None:
        assert v("16.11.5+31729.503") == v("16.11.5")
        assert hash(v("16.11.5+1")) == hash(v("16.11.5+2"))

    def test_revision_zero_equals_three_part(self) -> None:
        assert v("16.9.0.0") == v("16.9.0")
        assert v("16.9.0.1") > v("16.9.0")

    def test_not_equal_to_other_types(self) -> None:
        assert v("1.0.0") != "1.0.0"


class TestVersionRequirement:
    """Tests for VersionRequirement."""

    def test_minimum_is_inclusive(self) -> None:
        req = VersionRequirement.parse("16.9.0")
        assert req.satisfied_by(v("16.9.0"))
        assert not req.satisfied_by(v("16.8.9"))
        assert req.satisfied_by(v("17.0.0"))

    def test_minimum_has_no_upper_bound(self) -> None:
        req = VersionRequirement.parse("16.9.0")
        assert req.satisfied_by(v("99.0.0"))

    def test_prerelease_of_minimum_is_below_it(self) -> None:
        req = VersionRequirement.parse("17.0.0")
        assert not req.satisfied_by(v("17.0.0-pre.7.0"))

    @pytest.mark.parametrize("candidate", ["16.8.0", "16.9.0", "17.0.0-pre.1", "17.0.1", "17.0.0"])
    def test_exact_ignores_minimum(self, candidate: str) -> None:
        req = VersionRequirement.parse("16.9.0", "17.0.0")
        assert req.satisfied_by(v(candidate)) == (v(candidate) == v("17.0.0"))

    def test_exact_below_minimum_still_matches(self) -> None:
        req = VersionRequirement.parse("17.0.0", "16.0.0")
        assert req.satisfied_by(v("16.0.0"))
        assert not req.satisfied_by(v("17.0.0"))

    def test_exact_ignores_build_metadata(self) -> None:
        req = VersionRequirement.parse("16.9.0", "17.0.0")
        assert req.satisfied_by(v("17.0.0+31903.59"))

    def test_display_version(self) -> None:
        assert VersionRequirement.parse("16.9.0").display_version() == v("16.9.0")
        assert VersionRequirement.parse("16.9.0", "17.0.0").display_version() == v("17.0.0")

    def test_invalid_minimum_fails_fast(self) -> None:
        with pytest.raises(ParseError, match="bogus"):
            VersionRequirement.parse("bogus")

    def test_invalid_exact_fails_fast(self) -> None:
        with pytest.raises(ParseError):
            VersionRequirement.parse("16.9.0", "17.x")

    def test_frozen(self) -> None:
        req = VersionRequirement.parse("16.9.0")
        with pytest.raises(AttributeError):
            req.exact = v("17.0.0")  # type: ignore[misc]
