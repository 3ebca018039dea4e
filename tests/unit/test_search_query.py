"""
Unit tests for the SearchQuery data model.
"""

import pytest
from pathlib import Path
from pydantic import ValidationError
from workspace_finder.models.search_query import SearchQuery


class TestSearchQuery:
    """Test cases for SearchQuery."""

    def test_basic_query_creation(self):
        query = SearchQuery(root="/home/user/project", text="index", limit=10)

        assert query.root == "/home/user/project"
        assert query.text == "index"
        assert query.limit == 10
        assert query.max_depth == 10

    def test_text_kept_verbatim(self):
        query = SearchQuery(root=".", text="  Index.TS ", limit=5)
        assert query.text == "  Index.TS "
        assert query.text_lower == "  index.ts "

    def test_empty_text_allowed(self):
        query = SearchQuery(root=".", limit=5)
        assert query.text == ""
        assert query.text_lower == ""

    def test_includes_hidden(self):
        assert SearchQuery(root=".", text=".env", limit=1).includes_hidden()
        assert not SearchQuery(root=".", text="env", limit=1).includes_hidden()
        assert not SearchQuery(root=".", text="", limit=1).includes_hidden()

    def test_limit_zero_allowed(self):
        assert SearchQuery(root=".", limit=0).limit == 0

    def test_negative_limit_rejected(self):
        with pytest.raises(ValidationError):
            SearchQuery(root=".", limit=-1)

    def test_limit_required(self):
        with pytest.raises(ValidationError):
            SearchQuery(root=".")

    def test_user_directory_expanded(self):
        query = SearchQuery(root="~/projects", limit=1)
        assert query.root == str(Path("~/projects").expanduser())

    def test_frozen(self):
        query = SearchQuery(root=".", limit=1)
        with pytest.raises(ValidationError):
            query.limit = 2

    def test_get_root_path(self):
        query = SearchQuery(root="relative/dir", limit=1)
        assert query.get_root_path() == Path.cwd() / "relative" / "dir"

    def test_dict_conversion(self):
        query = SearchQuery(root="/srv/app", text="main", limit=3)
        data = query.to_dict()

        assert data == {'root': "/srv/app", 'text': "main", 'limit': 3, 'max_depth': 10}
        assert SearchQuery.from_dict(data) == query

    def test_str(self):
        text = str(SearchQuery(root="/srv/app", text="main", limit=3))
        assert "Query: 'main'" in text
        assert "Limit: 3" in text
