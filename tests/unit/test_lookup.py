"""Unit tests for identifier lookup."""

import pytest

from netflixanalyzer.core.exceptions import InvalidIdentifierFormat
from netflixanalyzer.core.loader import load_catalog
from netflixanalyzer.core.lookup import find_by_id, validate_identifier


class TestValidateIdentifier:
    """Test identifier shape validation."""

    @pytest.mark.parametrize("identifier", ["s1", "s0", "s8807", "s000123"])
    def test_valid_identifiers(self, identifier):
        """"s" followed by digits is accepted."""
        assert validate_identifier(identifier) == identifier

    @pytest.mark.parametrize(
        "identifier",
        ["", "s", "S1", "1", "s1a", "x1", " s1", "s1 ", "s1\n", "s-1", "s١"],
    )
    def test_invalid_identifiers(self, identifier):
        """Anything else raises InvalidIdentifierFormat."""
        with pytest.raises(InvalidIdentifierFormat, match="Expected format"):
            validate_identifier(identifier)

    def test_error_is_a_value_error(self):
        """Callers may catch it as a ValueError."""
        with pytest.raises(ValueError):
            validate_identifier("movie")


class TestFindById:
    """Test catalog lookup."""

    def test_finds_title(self, catalog_file):
        """A known identifier returns that title."""
        catalog = load_catalog(catalog_file).titles

        item = find_by_id(catalog, "s1")

        assert item is catalog[0]
        assert item.title == "Dick Johnson Is Dead"

    def test_not_found_returns_none(self, catalog_file):
        """A well-formed identifier with no match returns None."""
        catalog = load_catalog(catalog_file).titles

        assert find_by_id(catalog, "s999") is None

    def test_skipped_row_is_not_found(self, catalog_file):
        """Rows dropped by the loader cannot be looked up."""
        catalog = load_catalog(catalog_file).titles

        assert find_by_id(catalog, "s5") is None

    def test_invalid_format_never_returns_title(self, catalog_file):
        """Malformed identifiers raise even if a padded match could exist."""
        catalog = load_catalog(catalog_file).titles

        with pytest.raises(InvalidIdentifierFormat):
            find_by_id(catalog, " s4 ")

    def test_first_duplicate_wins(self, make_title):
        """With duplicate identifiers the first in order is returned."""
        first = make_title(identifier="s7", title="First")
        second = make_title(identifier="s7", title="Second")

        assert find_by_id([first, second], "s7") is first
