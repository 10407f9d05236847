"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from fixed_table.config import load_scrollbar_footprint
from fixed_table.models import Column, ColumnGroup, Placement


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    """Point the config loader at an empty location and clear env overrides."""
    config_path = tmp_path / "config.toml"
    monkeypatch.setattr("fixed_table.config._CONFIG_PATH", config_path)
    monkeypatch.delenv("FIXED_TABLE_SCROLLBAR_SIZE", raising=False)
    monkeypatch.delenv("FIXED_TABLE_SCROLLBAR_OFFSET", raising=False)
    load_scrollbar_footprint.cache_clear()
    yield config_path
    load_scrollbar_footprint.cache_clear()


@pytest.fixture
def plain_columns() -> tuple[Column, ...]:
    """Three 100px columns with the middle one flexible."""
    return (
        Column(width=100, key="left"),
        Column(width=100, flex_grow=1, key="middle"),
        Column(width=100, key="right"),
    )


@pytest.fixture
def grouped_groups() -> tuple[ColumnGroup, ...]:
    """A fixed group followed by two scrollable groups."""
    return (
        ColumnGroup(width=100, children_count=2, placement=Placement.FIXED, key="pinned"),
        ColumnGroup(width=200, children_count=2, key="details"),
        ColumnGroup(width=80, children_count=1, key="totals"),
    )


@pytest.fixture
def grouped_columns() -> tuple[Column, ...]:
    """Columns matching ``grouped_groups``: two fixed, three scrollable."""
    return (
        Column(width=50, placement=Placement.FIXED, group_idx=0, key="id"),
        Column(width=50, placement=Placement.FIXED, group_idx=0, key="name"),
        Column(width=100, group_idx=1, key="street"),
        Column(width=100, group_idx=1, key="city"),
        Column(width=80, group_idx=2, key="amount"),
    )

