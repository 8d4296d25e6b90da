"""
Unit tests for the models module.
"""

import dataclasses

import pytest

from envconverter.models import (
    EnvConverterError,
    InvalidFormatError,
    OutputFormat,
    Pair,
)


class TestPair:
    """Tests for Pair dataclass."""

    def test_create_pair(self):
        """Test creating a pair."""
        pair = Pair(key="FOO", value="bar")
        assert pair.key == "FOO"
        assert pair.value == "bar"

    def test_pairs_compare_by_value(self):
        """Test that equal key/value pairs are equal."""
        assert Pair("A", "1") == Pair("A", "1")
        assert Pair("A", "1") != Pair("A", "2")

    def test_pair_is_immutable(self):
        """Test that a pair cannot be modified after creation."""
        pair = Pair("A", "1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            pair.value = "2"


class TestOutputFormat:
    """Tests for OutputFormat enum."""

    def test_all_formats(self):
        """Test the fixed set of formats."""
        assert [f.value for f in OutputFormat] == ["csv", "tsv", "json", "md"]

    @pytest.mark.parametrize("name", ["csv", "tsv", "json", "md"])
    def test_from_name(self, name):
        """Test looking up each known format."""
        assert OutputFormat.from_name(name).value == name

    def test_from_name_unknown(self):
        """Test that an unknown format raises InvalidFormatError."""
        with pytest.raises(InvalidFormatError, match="Invalid format 'xml'"):
            OutputFormat.from_name("xml")

    def test_from_name_is_case_sensitive(self):
        """Test that format names must be lowercase."""
        with pytest.raises(InvalidFormatError):
            OutputFormat.from_name("CSV")


class TestInvalidFormatError:
    """Tests for InvalidFormatError."""

    def test_message_lists_formats(self):
        """Test that the message names every supported format."""
        error = InvalidFormatError("xml")
        assert str(error) == "Invalid format 'xml'. Use csv | tsv | json | md"

    def test_carries_format_name(self):
        """Test that the rejected name is kept on the error."""
        assert InvalidFormatError("yaml").format_name == "yaml"

    def test_hierarchy(self):
        """Test that the error is both a package error and a ValueError."""
        error = InvalidFormatError("xml")
        assert isinstance(error, EnvConverterError)
        assert isinstance(error, ValueError)
