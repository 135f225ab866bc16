"""Unit tests for diff_numerics.cli._parse_columns module."""

import pytest

from diff_numerics.api.compare.NumericDiffConfigError import NumericDiffConfigError
from diff_numerics.cli._parse_columns import _parse_columns

pytestmark = pytest.mark.unit


def test_parse_columns():
    assert _parse_columns("1,3,4") == frozenset({1, 3, 4})


def test_parse_columns_spaces_and_duplicates():
    assert _parse_columns(" 2, 2 ,5") == frozenset({2, 5})


@pytest.mark.parametrize("text", ["1,,3", "a", "1.5", ""])
def test_parse_columns_invalid(text):
    with pytest.raises(NumericDiffConfigError, match="Invalid column number"):
        _parse_columns(text)


def test_parse_columns_below_one():
    with pytest.raises(NumericDiffConfigError, match="at least 1"):
        _parse_columns("0,2")
