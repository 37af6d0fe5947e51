"""Unit tests for version parsing and compatibility ranges."""

import pytest

from devprep.runtime import (
    CompatibilityRange,
    Rejected,
    RuntimeInfo,
    UseCurrent,
    UseProvisioned,
    Version,
    VersionParseError,
)


class TestVersionParsing:
    """Test Version.parse on interpreter output."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("3.11.5", (3, 11, 5)),
            ("Python 3.13.0", (3, 13, 0)),
            ("Python 3.12.0rc1", (3, 12, 0)),
            ("3.9", (3, 9, None)),
            ("Python 2.7.18\n", (2, 7, 18)),
        ],
    )
    def test_parse_components(self, text, expected):
        """Should extract major, minor and optional patch."""
        version = Version.parse(text)
        assert (version.major, version.minor, version.patch) == expected

    @pytest.mark.parametrize("text", ["", "Python", "3", "version three", "v.3"])
    def test_parse_malformed_raises(self, text):
        """Malformed text is an error, never a default."""
        with pytest.raises(VersionParseError):
            Version.parse(text)

    def test_parse_error_keeps_text(self):
        """The error should carry the offending text."""
        with pytest.raises(VersionParseError) as exc_info:
            Version.parse("no digits here")

        assert exc_info.value.text == "no digits here"
        assert "no digits here" in exc_info.value.reason

    def test_str(self):
        """Should render the components that were present."""
        assert str(Version.parse("3.11.9")) == "3.11.9"
        assert str(Version.parse("3.13")) == "3.13"
        assert Version.parse("Python 3.11.9").series == "3.11"


class TestVersionOrdering:
    """Test comparisons used by the resolver."""

    def test_missing_patch_equals_zero(self):
        """3.13 and 3.13.0 are the same version."""
        assert Version.parse("3.13") == Version.parse("3.13.0")
        assert hash(Version.parse("3.13")) == hash(Version.parse("3.13.0"))

    def test_ordering(self):
        """Comparisons should be numeric, not lexical."""
        assert Version.parse("3.9.0") < Version.parse("3.10.0")
        assert Version.parse("3.12.9") < Version.parse("3.13")
        assert Version.parse("3.13.1") > Version.parse("3.13.0")
        assert Version.parse("3.8") <= Version.parse("3.8.0")


class TestCompatibilityRange:
    """Test the closed-open compatibility interval."""

    def test_bounds(self, compat_range):
        """Minimum is inclusive, maximum exclusive."""
        assert Version.parse("3.8.0") in compat_range
        assert Version.parse("3.12.7") in compat_range
        assert Version.parse("3.13.0") not in compat_range
        assert Version.parse("3.7.17") not in compat_range

    def test_empty_range_rejected(self):
        """A range must not be empty."""
        with pytest.raises(ValueError, match="Empty compatibility range"):
            CompatibilityRange(Version.parse("3.13"), Version.parse("3.8"))

    def test_str(self, compat_range):
        assert str(compat_range) == "[3.8.0, 3.13.0)"


class TestOutcomes:
    """Test the resolution outcome variants."""

    def test_kinds(self):
        """Each variant should carry its own tag."""
        version = Version.parse("3.11.9")
        assert UseCurrent(path="/usr/bin/python3", version=version).kind == "use_current"
        assert UseProvisioned(path="/p", version=version, backend="brew").kind == "use_provisioned"
        assert Rejected(reason="below minimum", version=version).kind == "rejected"

    def test_runtime_info_repr(self):
        """Should have useful repr."""
        info = RuntimeInfo(path="/usr/bin/python3", source="system", version_text="Python 3.11.0\n")

        repr_str = repr(info)
        assert "Python 3.11.0" in repr_str
        assert "/usr/bin/python3" in repr_str
        assert "system" in repr_str
