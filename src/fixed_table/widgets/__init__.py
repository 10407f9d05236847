"""Textual DataTable integration for column layouts."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from itertools import takewhile

from textual.widgets import DataTable

from fixed_table.errors import ColumnLayoutError
from fixed_table.layout import compute_column_layout
from fixed_table.models import Column, ColumnGroup, ColumnLayout
from fixed_table.selector import ColumnLayoutSelector

logger = logging.getLogger(__name__)


def fit_data_table(
    table: DataTable,
    columns: Sequence[Column | Mapping],
    groups: Sequence[ColumnGroup | Mapping] = (),
    *,
    scroll_enabled_y: bool = False,
    selector: ColumnLayoutSelector | None = None,
    scrollbar_footprint: int | None = None,
) -> ColumnLayout | None:
    """Size the columns of *table* from their layout declarations.

    Declarations are matched to ``table.ordered_columns`` by position. Layout
    widths include cell padding, which is subtracted before the width is
    applied to the DataTable column. Leading left-fixed columns are frozen
    with ``DataTable.fixed_columns``.

    Args:
        table: The DataTable to adjust.
        columns: One declaration per table column.
        groups: Column groups the declarations refer to.
        scroll_enabled_y: Whether a vertical scrollbar takes up table width.
        selector: Optional memoizing selector to compute the layout through.
        scrollbar_footprint: Cells taken by a visible vertical scrollbar.
            Defaults to the table's ``scrollbar-size-vertical`` style.

    Returns:
        The computed layout, or None when the table has no columns or no
        width yet.

    Raises:
        ColumnLayoutError: If the number of declarations does not match the
            number of table columns.
    """
    cols = table.ordered_columns
    if not cols:
        return None
    available = table.size.width
    if available <= 0:
        return None
    if len(columns) != len(cols):
        raise ColumnLayoutError(
            f"got {len(columns)} column declarations for a table "
            f"with {len(cols)} columns"
        )

    if scrollbar_footprint is None:
        scrollbar_footprint = table.styles.scrollbar_size_vertical

    compute = selector or compute_column_layout
    layout = compute(groups, columns, scroll_enabled_y, available, scrollbar_footprint)

    padding = 2 * table.cell_padding
    for col, column in zip(cols, layout.column_props):
        col.auto_width = False
        col.width = max(column.width - padding, 1)
    table.fixed_columns = sum(1 for _ in takewhile(lambda c: c.fixed, layout.column_props))
    logger.debug(
        "Fitted %d columns into %d cells (max_scroll_x=%d)",
        len(cols),
        available,
        layout.max_scroll_x,
    )

    table.refresh(layout=True)
    return layout
