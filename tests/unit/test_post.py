"""Unit tests for Post domain entity."""

import pytest

from tinyblog.domain.errors import ValidationError
from tinyblog.domain.post import Post, missing_fields


class TestPostSummary:
    """Tests for Post.summary."""

    def test_summary_joins_title_and_description(self):
        post = Post(id=None, title="My title", description="The post description")
        assert post.summary() == "My title - The post description"

    def test_summary_is_repeatable(self):
        post = Post(id=1, title="A", description="B")
        first = post.summary()
        second = post.summary()
        assert first == second == "A - B"
        assert post.title == "A"
        assert post.description == "B"

    def test_summary_reflects_current_fields(self):
        """Summary is computed on each call, not cached."""
        post = Post(id=1, title="Old", description="text")
        assert post.summary() == "Old - text"
        post.title = "New"
        assert post.summary() == "New - text"

    def test_empty_title(self):
        post = Post(id=None, title="", description="x")
        assert post.summary() == " - x"

    def test_empty_description(self):
        post = Post(id=None, title="x", description="")
        assert post.summary() == "x - "

    def test_both_empty(self):
        post = Post(id=None, title="", description="")
        assert post.summary() == " - "

    def test_separator_inside_fields_kept_literally(self):
        post = Post(id=None, title="a - b", description="c")
        assert post.summary() == "a - b - c"

    def test_unicode_fields(self):
        post = Post(id=None, title="日本語", description="émojis 🎉")
        assert post.summary() == "日本語 - émojis 🎉"

    def test_none_title_raises(self):
        post = Post(id=None, title=None, description="x")  # type: ignore[arg-type]
        with pytest.raises(ValidationError) as exc_info:
            post.summary()
        assert exc_info.value.fields == ["title"]

    def test_none_description_raises(self):
        post = Post(id=None, title="x", description=None)  # type: ignore[arg-type]
        with pytest.raises(ValidationError) as exc_info:
            post.summary()
        assert exc_info.value.fields == ["description"]


class TestMissingFields:
    """Tests for missing_fields."""

    def test_nothing_missing(self):
        assert missing_fields("t", "d") == []

    def test_empty_strings_are_present(self):
        assert missing_fields("", "") == []

    def test_both_missing(self):
        assert missing_fields(None, None) == ["title", "description"]
