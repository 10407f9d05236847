"""Column layout engine for horizontally scrollable tables."""

from __future__ import annotations

import logging

from fixed_table.errors import ColumnLayoutError
from fixed_table.layout import (
    annotate_groups,
    compute_column_layout,
    distribute_flex_widths,
    partition_columns,
    scroll_metrics,
    validate_declarations,
)
from fixed_table.models import Column, ColumnGroup, ColumnLayout, Placement, TableState
from fixed_table.selector import ColumnLayoutSelector, column_widths_selector
from fixed_table.width_helper import total_flex_grow, total_width

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Column",
    "ColumnGroup",
    "ColumnLayout",
    "ColumnLayoutError",
    "ColumnLayoutSelector",
    "Placement",
    "TableState",
    "annotate_groups",
    "column_widths_selector",
    "compute_column_layout",
    "distribute_flex_widths",
    "partition_columns",
    "scroll_metrics",
    "total_flex_grow",
    "total_width",
    "validate_declarations",
]
