"""Tests for width summing helpers."""

from fixed_table.models import Column, ColumnGroup
from fixed_table.width_helper import total_flex_grow, total_width


class TestTotalWidth:
    """Tests for total_width."""

    def test_empty(self):
        assert total_width([]) == 0

    def test_sums_columns(self):
        assert total_width([Column(width=10), Column(width=25)]) == 35

    def test_sums_groups(self):
        assert total_width([ColumnGroup(width=100), ColumnGroup(width=50)]) == 150


class TestTotalFlexGrow:
    """Tests for total_flex_grow."""

    def test_empty(self):
        assert total_flex_grow([]) == 0

    def test_ignores_unset(self):
        columns = [Column(width=1, flex_grow=2), Column(width=1), Column(width=1, flex_grow=None)]
        assert total_flex_grow(columns) == 2

    def test_fractional_weights(self):
        columns = [Column(width=1, flex_grow=0.5), Column(width=1, flex_grow=1.5)]
        assert total_flex_grow(columns) == 2.0
