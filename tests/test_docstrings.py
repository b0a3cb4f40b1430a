"""
Tests for sugarscan.docstrings module.

Tests extraction of declared exceptions from docstrings.
"""

import inspect

from sugarscan.docstrings import parse_raises


def google_style():
    """
    Do something.

    Args:
        value: Not an exception

    Raises:
        ValueError: If value is empty
        re.error: If the pattern is bad
            and this line continues the description
        KeyError

    Returns:
        Nothing useful
    """


def numpy_style():
    """
    Do something.

    Raises
    ------
    ValueError
        If value is empty
    KeyError
        If key is missing

    Returns
    -------
    None
    """


def sphinx_style():
    """
    Do something.

    :param value: Not an exception
    :raises ValueError: If value is empty
    :raise KeyError: If key is missing
    """


class TestParseRaises:
    """Tests for parse_raises."""

    def test_none_and_empty(self):
        assert parse_raises(None) == []
        assert parse_raises("") == []

    def test_no_raises_section(self):
        assert parse_raises("Just a summary.\n\nArgs:\n    x: a value") == []

    def test_google_style(self):
        assert parse_raises(inspect.getdoc(google_style)) == [
            "ValueError",
            "re.error",
            "KeyError",
        ]

    def test_numpy_style(self):
        assert parse_raises(inspect.getdoc(numpy_style)) == ["ValueError", "KeyError"]

    def test_sphinx_style(self):
        assert parse_raises(inspect.getdoc(sphinx_style)) == ["ValueError", "KeyError"]

    def test_duplicates_are_dropped(self):
        doc = "Raises:\n    ValueError: first\n    ValueError: again\n"
        assert parse_raises(doc) == ["ValueError"]

    def test_section_ends_at_dedent(self):
        doc = "Raises:\n    ValueError: first\nTrailingText here\n"
        assert parse_raises(doc) == ["ValueError"]
