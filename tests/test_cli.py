"""
Tests for the bookshelf command-line listing.
"""

import logging

import pytest
from typer.testing import CliRunner

from bookshelf import settings
from bookshelf.cli import app, format_book_line, resolve_log_level
from bookshelf.library import Library
from bookshelf.models import LibraryCollection
from bookshelf.storage import ListDataOperation

runner = CliRunner()

KNUTH_LINE = "Title: The Art of Computer Programming, Author(s): Donald Knuth, Collection: Reserve"
PRINCIPIA_LINE = ("Title: Principia Mathematica, Author(s): Alfred North Whitehead, Bertrand Russell, "
                  "Collection: General")


class TestDemo:
    """Test cases for the demo listing."""

    def test_default_listing(self):
        """The demo lists both sample books in insertion order."""
        result = runner.invoke(app, ["--backend", "list"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Library list:", KNUTH_LINE, PRINCIPIA_LINE]

    def test_set_backend_listing(self):
        """The set backend lists the same books, in any order."""
        result = runner.invoke(app, ["--backend", "set"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "Library list:"
        assert sorted(lines[1:]) == sorted([KNUTH_LINE, PRINCIPIA_LINE])

    def test_collection_filter(self):
        """Only books in the requested collection are listed."""
        result = runner.invoke(app, ["--backend", "list", "--collection", "Reserve"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Library list:", KNUTH_LINE]

    def test_unknown_backend(self):
        """An unknown backend is reported and exits with status 1."""
        result = runner.invoke(app, ["--backend", "mssql"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "mssql" in result.output


    def test_unknown_log_level(self, monkeypatch):
        """A bad log level is reported and exits with status 1."""
        monkeypatch.setattr(settings, "LOG_LEVEL", "chatty")
        result = runner.invoke(app, ["--backend", "list"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "chatty" in result.output

    def test_resolve_log_level(self):
        """Level names resolve case-insensitively."""
        assert resolve_log_level("debug") == logging.DEBUG
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_log_level("chatty")


class TestFormatBookLine:
    """Test cases for listing line formatting."""

    def test_single_author(self):
        """A single author is printed without separators."""
        library = Library(data_operation=ListDataOperation())
        library.add_book("Dune", ["Frank Herbert"], LibraryCollection.General)
        assert format_book_line(library, "Dune") == "Title: Dune, Author(s): Frank Herbert, Collection: General"
