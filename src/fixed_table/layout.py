"""Column layout: flex width distribution, region partitioning, scroll metrics.

Every function here is pure. Records that need no adjustment are passed
through as the same objects, so callers can detect unchanged columns and
groups with an identity check.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace

from fixed_table.config import load_scrollbar_footprint
from fixed_table.errors import ColumnLayoutError
from fixed_table.models import Column, ColumnGroup, ColumnLayout, Placement
from fixed_table.width_helper import total_flex_grow, total_width

logger = logging.getLogger(__name__)


def distribute_flex_widths(
    groups: Sequence[ColumnGroup],
    columns: Sequence[Column],
    viewport_width: int,
) -> tuple[Sequence[ColumnGroup], Sequence[Column]]:
    """Grow flexible columns into the space left over by declared widths.

    Leftover space is handed out column by column, each flex column taking
    ``floor(flex_grow * remaining_width / remaining_grow)`` of what is still
    unallocated. Rounding remainders therefore roll forward to later flex
    columns and the full leftover is consumed.

    Group widths are then recomputed as the sum of their member columns.

    Args:
        groups: Column groups in declaration order.
        columns: Columns in declaration order.
        viewport_width: Width available for all columns.

    Returns:
        A ``(groups, columns)`` pair. *columns* is returned as-is when no
        column is flexible; unchanged groups keep their identity.
    """
    new_columns: Sequence[Column] = columns
    remaining_grow = total_flex_grow(columns)

    if remaining_grow != 0:
        remaining_width = max(viewport_width - total_width(columns), 0)
        logger.debug(
            "Distributing %s px over flex grow %s", remaining_width, remaining_grow
        )

        adjusted: list[Column] = []
        for column in columns:
            flex_grow = column.flex_grow
            if not flex_grow:
                adjusted.append(column)
                continue
            flex_width = int(flex_grow * remaining_width // remaining_grow)
            flex_width = min(flex_width, remaining_width)
            remaining_grow -= flex_grow
            remaining_width -= flex_width
            adjusted.append(replace(column, width=column.width + flex_width))
        new_columns = tuple(adjusted)

    group_widths = [0] * len(groups)
    for column in new_columns:
        if column.group_idx is not None:
            group_widths[column.group_idx] += column.width

    new_groups = tuple(
        group if group.width == group_widths[idx] else replace(group, width=group_widths[idx])
        for idx, group in enumerate(groups)
    )
    return new_groups, new_columns


def annotate_groups(
    columns: Sequence[Column],
    groups: Sequence[ColumnGroup],
) -> tuple[tuple[Column, ...], tuple[ColumnGroup, ...]]:
    """Link scrollable groups to the scrollable columns they span.

    Each scrollable group gets ``first_child_idx``, the index of its first
    child among scrollable columns, and each column in its ``children_count``
    run gets ``parent_idx``, the group's index among scrollable groups.
    Records are replaced in place of their original position so the result
    keeps the declaration order; already annotated records are reused.

    Args:
        columns: Flex-adjusted columns.
        groups: Flex-adjusted column groups.

    Returns:
        ``(columns, groups)`` in declaration order, annotated.

    Raises:
        ColumnLayoutError: If a scrollable group's run does not fit the
            scrollable columns, spans a column of another group, or leaves
            one of its own columns outside the run.
    """
    annotated_columns = list(columns)
    annotated_groups = list(groups)
    scrollable_positions = [
        position
        for position, column in enumerate(columns)
        if column.placement is Placement.SCROLLABLE
    ]

    scrollable_group_count = 0
    cumulative_child_index = 0
    covered: set[int] = set()

    for group_index, group in enumerate(groups):
        if group.placement is not Placement.SCROLLABLE:
            continue

        run_end = cumulative_child_index + group.children_count
        if run_end > len(scrollable_positions):
            raise ColumnLayoutError(
                f"column group {group_index} spans {group.children_count} columns "
                f"from scrollable index {cumulative_child_index}, but only "
                f"{len(scrollable_positions)} scrollable columns exist"
            )

        parent_idx = scrollable_group_count
        for child_index in range(cumulative_child_index, run_end):
            position = scrollable_positions[child_index]
            child = annotated_columns[position]
            if child.group_idx is not None and child.group_idx != group_index:
                raise ColumnLayoutError(
                    f"scrollable column {child_index} belongs to group "
                    f"{child.group_idx} but falls inside the run of group {group_index}"
                )
            if child.parent_idx != parent_idx:
                annotated_columns[position] = replace(child, parent_idx=parent_idx)
            covered.add(child_index)

        if group.first_child_idx != cumulative_child_index:
            annotated_groups[group_index] = replace(
                group, first_child_idx=cumulative_child_index
            )
        scrollable_group_count += 1
        cumulative_child_index = run_end

    for child_index, position in enumerate(scrollable_positions):
        column = annotated_columns[position]
        if column.group_idx is not None and child_index not in covered:
            raise ColumnLayoutError(
                f"scrollable column {child_index} belongs to group "
                f"{column.group_idx} but lies outside its children_count run"
            )

    return tuple(annotated_columns), tuple(annotated_groups)


def _split_regions(
    columns: Iterable[Column],
    groups: Iterable[ColumnGroup],
) -> tuple[
    tuple[Column, ...],
    tuple[Column, ...],
    tuple[Column, ...],
    tuple[ColumnGroup, ...],
]:
    """Stable-filter annotated columns and groups into their regions."""
    fixed_columns: list[Column] = []
    fixed_right_columns: list[Column] = []
    scrollable_columns: list[Column] = []

    for column in columns:
        match column.placement:
            case Placement.FIXED:
                fixed_columns.append(column)
            case Placement.FIXED_RIGHT:
                fixed_right_columns.append(column)
            case _:
                scrollable_columns.append(column)

    scrollable_groups = tuple(
        group for group in groups if group.placement is Placement.SCROLLABLE
    )
    return (
        tuple(fixed_columns),
        tuple(fixed_right_columns),
        tuple(scrollable_columns),
        scrollable_groups,
    )


def partition_columns(
    columns: Sequence[Column],
    groups: Sequence[ColumnGroup],
) -> tuple[
    tuple[Column, ...],
    tuple[Column, ...],
    tuple[Column, ...],
    tuple[ColumnGroup, ...],
]:
    """Split columns into left-fixed, right-fixed and scrollable regions.

    Relative order is preserved in each region. Scrollable groups are kept and
    annotated as described in :func:`annotate_groups`. Fixed and fixed-right
    groups are dropped.

    Args:
        columns: Flex-adjusted columns.
        groups: Flex-adjusted column groups.

    Returns:
        ``(fixed_columns, fixed_right_columns, scrollable_columns,
        scrollable_column_groups)``.

    Raises:
        ColumnLayoutError: If the group runs do not match the scrollable
            columns.
    """
    return _split_regions(*annotate_groups(columns, groups))


def scroll_metrics(
    fixed_columns: Iterable[Column],
    fixed_right_columns: Iterable[Column],
    all_columns: Iterable[Column],
    viewport_width: int,
) -> tuple[int, int]:
    """Return ``(available_scroll_width, max_scroll_x)``, both clamped at 0."""
    available_scroll_width = max(
        viewport_width - total_width(fixed_columns) - total_width(fixed_right_columns),
        0,
    )
    max_scroll_x = max(0, total_width(all_columns) - viewport_width)
    return available_scroll_width, max_scroll_x


def validate_declarations(
    groups: Sequence[ColumnGroup], columns: Sequence[Column]
) -> None:
    """Check that column and group declarations are consistent.

    Raises:
        ColumnLayoutError: On negative widths, flex weights or child counts,
            a ``group_idx`` outside the group list, a column whose placement
            differs from its group's, or a group with more member columns
            than its ``children_count``.
    """
    member_counts = [0] * len(groups)
    for idx, group in enumerate(groups):
        if group.children_count < 0:
            raise ColumnLayoutError(
                f"column group {idx} has negative children_count {group.children_count}"
            )

    for idx, column in enumerate(columns):
        if column.width < 0:
            raise ColumnLayoutError(f"column {idx} has negative width {column.width}")
        if (column.flex_grow or 0) < 0:
            raise ColumnLayoutError(
                f"column {idx} has negative flex_grow {column.flex_grow}"
            )
        if column.group_idx is None:
            continue
        if not 0 <= column.group_idx < len(groups):
            raise ColumnLayoutError(
                f"column {idx} references group {column.group_idx}, "
                f"but only {len(groups)} groups are declared"
            )
        group = groups[column.group_idx]
        if group.placement is not column.placement:
            raise ColumnLayoutError(
                f"column {idx} is {column.placement.value} but its group "
                f"{column.group_idx} is {group.placement.value}"
            )
        member_counts[column.group_idx] += 1

    for idx, (group, members) in enumerate(zip(groups, member_counts)):
        if members > group.children_count:
            raise ColumnLayoutError(
                f"column group {idx} has {members} member columns "
                f"but children_count {group.children_count}"
            )


def _as_columns(columns: Iterable[Column | Mapping]) -> tuple[Column, ...]:
    """Return *columns* as a tuple of Column, converting prop mappings."""
    if isinstance(columns, tuple) and all(isinstance(c, Column) for c in columns):
        return columns
    return tuple(c if isinstance(c, Column) else Column.from_dict(c) for c in columns)


def _as_groups(groups: Iterable[ColumnGroup | Mapping]) -> tuple[ColumnGroup, ...]:
    """Return *groups* as a tuple of ColumnGroup, converting prop mappings."""
    if isinstance(groups, tuple) and all(isinstance(g, ColumnGroup) for g in groups):
        return groups
    return tuple(
        g if isinstance(g, ColumnGroup) else ColumnGroup.from_dict(g) for g in groups
    )


def compute_column_layout(
    column_group_props: Iterable[ColumnGroup | Mapping],
    column_props: Iterable[Column | Mapping],
    scroll_enabled_y: bool,
    width: int,
    scrollbar_footprint: int | None = None,
) -> ColumnLayout:
    """Compute final column widths, regions and scroll range for a table.

    Args:
        column_group_props: Column groups, as models or camelCase mappings.
        column_props: Columns, as models or camelCase mappings.
        scroll_enabled_y: Whether a vertical scrollbar is currently shown.
        width: Total table width, including any vertical scrollbar.
        scrollbar_footprint: Space taken by a visible vertical scrollbar.
            Defaults to the configured scrollbar size plus offset.

    Returns:
        The composite ColumnLayout.

    Raises:
        ColumnLayoutError: If the declarations are structurally invalid.
    """
    groups = _as_groups(column_group_props)
    columns = _as_columns(column_props)
    validate_declarations(groups, columns)

    scrollbar_space = 0
    if scroll_enabled_y:
        if scrollbar_footprint is None:
            scrollbar_footprint = load_scrollbar_footprint()
        scrollbar_space = scrollbar_footprint
    viewport_width = width - scrollbar_space

    new_groups, new_columns = distribute_flex_widths(groups, columns, viewport_width)
    new_columns, new_groups = annotate_groups(new_columns, new_groups)
    fixed, fixed_right, scrollable, scrollable_groups = _split_regions(
        new_columns, new_groups
    )
    available_scroll_width, max_scroll_x = scroll_metrics(
        fixed, fixed_right, new_columns, viewport_width
    )

    return ColumnLayout(
        column_group_props=new_groups,
        column_props=new_columns,
        available_scroll_width=available_scroll_width,
        fixed_columns=fixed,
        fixed_right_columns=fixed_right,
        scrollable_columns=scrollable,
        scrollable_column_groups=scrollable_groups,
        max_scroll_x=max_scroll_x,
    )
