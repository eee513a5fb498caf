"""
Unit tests for the search request and search result data models.
"""

import os
import pytest
from pydantic import ValidationError

from labtools.models.search_request import SearchRequest
from labtools.models.search_results import SearchResult


class TestSearchRequest:
    """Test cases for SearchRequest."""

    def test_basic_request_creation(self):
        """Test creating a basic search request."""
        request = SearchRequest(root="/tmp/project", targets=["a.txt", "b.txt"])

        assert request.root == "/tmp/project"
        assert request.targets == ["a.txt", "b.txt"]
        assert request.case_sensitive is True

    def test_duplicate_targets_removed(self):
        """Test that repeated names collapse keeping first-seen order."""
        request = SearchRequest(root=".", targets=["b.txt", "a.txt", "b.txt"])

        assert request.targets == ["b.txt", "a.txt"]

    def test_case_variants_kept_separately(self):
        """Test that differently cased names are distinct targets."""
        request = SearchRequest(root=".", targets=["a.txt", "A.TXT"], case_sensitive=False)

        assert request.targets == ["a.txt", "A.TXT"]

    def test_empty_root_rejected(self):
        """Test that empty and blank roots fail validation."""
        with pytest.raises(ValidationError):
            SearchRequest(root="", targets=["a.txt"])

        with pytest.raises(ValidationError):
            SearchRequest(root="  ", targets=["a.txt"])

    def test_empty_targets_rejected(self):
        """Test that an empty target list fails validation."""
        with pytest.raises(ValidationError):
            SearchRequest(root=".", targets=[])

    def test_empty_target_name_rejected(self):
        """Test that an empty target name fails validation."""
        with pytest.raises(ValidationError):
            SearchRequest(root=".", targets=["a.txt", ""])

    def test_root_path_is_absolute(self):
        """Test that relative roots resolve against the working directory."""
        request = SearchRequest(root="some/dir", targets=["a.txt"])

        assert request.get_root_path().is_absolute()
        assert str(request.get_root_path()) == os.path.abspath("some/dir")

    def test_string_representation(self):
        """Test string representation."""
        request = SearchRequest(root="/data", targets=["a.txt"], case_sensitive=False)

        assert "/data" in str(request)
        assert "case-insensitive" in str(request)


class TestSearchResult:
    """Test cases for SearchResult."""

    def setup_method(self):
        """Set up test fixtures."""
        self.result = SearchResult(
            root="/data",
            matches={
                "a.txt": ("/data/a.txt", "/data/sub/a.txt"),
                "b.txt": (),
            },
            errors=("Cannot access directory: /data/locked: Permission denied",),
            directories_traversed=3,
            entries_scanned=7,
        )

    def test_counts(self):
        """Test per-name and total counts."""
        assert self.result.get_count("a.txt") == 2
        assert self.result.get_count("b.txt") == 0
        assert self.result.get_count("never.txt") == 0
        assert self.result.get_counts() == {"a.txt": 2, "b.txt": 0}
        assert self.result.get_total_matches() == 2

    def test_found_and_missing(self):
        """Test found and missing name lists."""
        assert self.result.get_found_names() == ["a.txt"]
        assert self.result.get_missing_names() == ["b.txt"]

    def test_get_paths_returns_copy(self):
        """Test that returned path lists do not alter the result."""
        paths = self.result.get_paths("a.txt")
        paths.append("/elsewhere")

        assert self.result.get_count("a.txt") == 2

    def test_result_is_frozen(self):
        """Test that results cannot be modified after creation."""
        with pytest.raises(ValidationError):
            self.result.root = "/other"

    def test_errors(self):
        """Test error reporting."""
        assert self.result.has_errors()
        assert not SearchResult(root="/data").has_errors()

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = self.result.to_dict()

        assert data['matches']["a.txt"] == ["/data/a.txt", "/data/sub/a.txt"]
        assert data['counts'] == {"a.txt": 2, "b.txt": 0}
        assert data['has_errors'] is True
        assert data['entries_scanned'] == 7

    def test_string_representation(self):
        """Test string representation."""
        text = str(self.result)

        assert "Found 2 matches" in text
        assert "1/2 names found" in text
        assert "Errors: 1" in text
