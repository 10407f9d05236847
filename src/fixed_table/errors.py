"""Custom exceptions for the column layout engine."""


class ColumnLayoutError(ValueError):
    """Raised when column or group declarations are structurally invalid."""
