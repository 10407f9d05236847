"""Data models for table columns, column groups, and computed layouts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class Placement(Enum):
    """Horizontal region a column or group is rendered in."""

    FIXED = "fixed"
    FIXED_RIGHT = "fixedRight"
    SCROLLABLE = "scrollable"

    @classmethod
    def from_flags(cls, fixed: bool = False, fixed_right: bool = False) -> Placement:
        """Return the placement for a pair of ``fixed``/``fixedRight`` flags.

        ``fixed`` takes precedence when both flags are set.
        """
        if fixed:
            return cls.FIXED
        if fixed_right:
            return cls.FIXED_RIGHT
        return cls.SCROLLABLE


@dataclass(frozen=True)
class Column:
    """A single table column.

    For flexible columns (``flex_grow > 0``) the declared ``width`` is the
    minimum width; leftover viewport space is added on top of it.
    ``parent_idx`` is filled in by partitioning and points at the owning
    group within the scrollable group list.
    """

    width: int
    flex_grow: int | float = 0
    placement: Placement = Placement.SCROLLABLE
    group_idx: int | None = None
    key: str | None = None
    label: str = ""
    parent_idx: int | None = None

    @property
    def fixed(self) -> bool:
        """Return True when pinned to the left edge."""
        return self.placement is Placement.FIXED

    @property
    def fixed_right(self) -> bool:
        """Return True when pinned to the right edge."""
        return self.placement is Placement.FIXED_RIGHT

    @classmethod
    def from_dict(cls, props: Mapping) -> Column:
        """Build a column from a camelCase prop mapping.

        Args:
            props: Mapping with ``width`` and optionally ``flexGrow``,
                ``fixed``, ``fixedRight``, ``groupIdx``, ``key`` and ``label``.

        Returns:
            The corresponding Column.
        """
        return cls(
            width=props.get("width", 0),
            flex_grow=props.get("flexGrow") or 0,
            placement=Placement.from_flags(
                bool(props.get("fixed")), bool(props.get("fixedRight"))
            ),
            group_idx=props.get("groupIdx"),
            key=props.get("key"),
            label=props.get("label", ""),
        )


@dataclass(frozen=True)
class ColumnGroup:
    """A header spanning a contiguous run of columns."""

    width: int = 0
    children_count: int = 0
    placement: Placement = Placement.SCROLLABLE
    key: str | None = None
    label: str = ""
    first_child_idx: int | None = None

    @property
    def fixed(self) -> bool:
        """Return True when pinned to the left edge."""
        return self.placement is Placement.FIXED

    @property
    def fixed_right(self) -> bool:
        """Return True when pinned to the right edge."""
        return self.placement is Placement.FIXED_RIGHT

    @classmethod
    def from_dict(cls, props: Mapping) -> ColumnGroup:
        """Build a column group from a camelCase prop mapping."""
        return cls(
            width=props.get("width", 0),
            children_count=props.get("childrenCount", 0),
            placement=Placement.from_flags(
                bool(props.get("fixed")), bool(props.get("fixedRight"))
            ),
            key=props.get("key"),
            label=props.get("label", ""),
        )


@dataclass(frozen=True)
class ColumnLayout:
    """Composite result of a column layout pass.

    ``column_group_props`` and ``column_props`` hold the flex-adjusted
    declarations in their original order; the remaining sequences are the
    per-region partitions consumed by the renderer.
    """

    column_group_props: tuple[ColumnGroup, ...]
    column_props: tuple[Column, ...]
    available_scroll_width: int
    fixed_columns: tuple[Column, ...]
    fixed_right_columns: tuple[Column, ...]
    scrollable_columns: tuple[Column, ...]
    scrollable_column_groups: tuple[ColumnGroup, ...]
    max_scroll_x: int


@dataclass
class TableState:
    """The slice of table widget state that column layout depends on."""

    column_group_props: tuple[ColumnGroup, ...] = ()
    column_props: tuple[Column, ...] = ()
    width: int = 0
    scroll_enabled_y: bool = False
