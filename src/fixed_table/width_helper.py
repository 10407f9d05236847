"""Summing helpers over column sequences."""

from __future__ import annotations

from collections.abc import Iterable

from fixed_table.models import Column, ColumnGroup


def total_width(columns: Iterable[Column | ColumnGroup]) -> int:
    """Return the sum of ``width`` over *columns* (0 when empty)."""
    return sum(column.width for column in columns)


def total_flex_grow(columns: Iterable[Column]) -> int | float:
    """Return the sum of ``flex_grow`` over *columns* (0 when empty)."""
    return sum(column.flex_grow or 0 for column in columns)
