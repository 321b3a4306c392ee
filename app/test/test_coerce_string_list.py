import pytest
from app.helper.coerce_string_list import coerce_string_list


def test_string_split_on_newlines_without_empty_segments():
    """Test that strings are split on newlines and empty segments dropped."""
    assert coerce_string_list("a\n\nb\nc\n") == ["a", "b", "c"]


def test_list_returned_unchanged():
    """Test that lists pass through untouched."""
    value = ["a", "", "b"]
    assert coerce_string_list(value) is value


def test_empty_string_gives_empty_list():
    """Test that an empty string becomes an empty list."""
    assert coerce_string_list("") == []


def test_other_types_rejected():
    """Test that values other than strings and lists are rejected."""
    with pytest.raises(TypeError):
        coerce_string_list(42)
