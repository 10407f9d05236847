"""Memoized access to column layouts.

A layout is recomputed only when one of its four inputs changes under
shallow comparison: the same object, or sequences of equal length whose
items are the same objects, or equal scalars.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from fixed_table.layout import compute_column_layout
from fixed_table.models import ColumnLayout, TableState

logger = logging.getLogger(__name__)

_MISSING = object()


def _shallow_equal(previous: Any, current: Any) -> bool:
    """Return True when *current* is shallowly equal to *previous*."""
    if previous is current:
        return True
    if isinstance(previous, (str, bytes)) or isinstance(current, (str, bytes)):
        return previous == current
    if isinstance(previous, Sequence) and isinstance(current, Sequence):
        return len(previous) == len(current) and all(
            a is b for a, b in zip(previous, current)
        )
    return previous == current


class ColumnLayoutSelector:
    """Cache the most recent column layout keyed by its inputs.

    Calling the selector with the same group specs, column specs, scrollbar
    flag, width and scrollbar footprint as the previous call returns the
    previous ColumnLayout object without recomputing it.
    """

    def __init__(
        self,
        compute: Callable[..., ColumnLayout] = compute_column_layout,
    ) -> None:
        self._compute = compute
        self._last_args: tuple | object = _MISSING
        self._last_result: ColumnLayout | None = None
        self.hits = 0
        self.misses = 0

    def __call__(
        self,
        column_group_props: Sequence,
        column_props: Sequence,
        scroll_enabled_y: bool,
        width: int,
        scrollbar_footprint: int | None = None,
    ) -> ColumnLayout:
        args = (
            column_group_props,
            column_props,
            scroll_enabled_y,
            width,
            scrollbar_footprint,
        )
        if self._last_args is not _MISSING and all(
            _shallow_equal(prev, cur) for prev, cur in zip(self._last_args, args)
        ):
            self.hits += 1
            logger.debug("Column layout cache hit")
            return self._last_result

        self.misses += 1
        logger.debug(
            "Column layout cache miss: %d columns, width %s, scroll_enabled_y=%s",
            len(column_props),
            width,
            scroll_enabled_y,
        )
        result = self._compute(*args)
        self._last_args = args
        self._last_result = result
        return result

    def cache_clear(self) -> None:
        """Forget the cached inputs and layout."""
        self._last_args = _MISSING
        self._last_result = None


_default_selector = ColumnLayoutSelector()


def column_widths_selector(
    state: TableState,
    scrollbars_visible: Callable[[TableState], bool] | None = None,
) -> ColumnLayout:
    """Return the column layout for *state*, memoized across calls.

    Args:
        state: Current table state.
        scrollbars_visible: Optional callable deciding whether a vertical
            scrollbar is shown. Defaults to ``state.scroll_enabled_y``.

    Returns:
        The ColumnLayout for the state's columns and width.
    """
    if scrollbars_visible is None:
        scroll_enabled_y = state.scroll_enabled_y
    else:
        scroll_enabled_y = bool(scrollbars_visible(state))
    return _default_selector(
        state.column_group_props,
        state.column_props,
        scroll_enabled_y,
        state.width,
    )
