"""
Exception types shared by the unit and quantity layers.
"""


class DimensionalError(Exception):
    """Raised when dimensional analysis fails."""
    pass


class IncompatibleUnitsError(DimensionalError):
    """Raised when two quantities or units do not share a dimension vector."""

    def __init__(self, operation: str, left, right):
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot {operation} quantities with different dimensions: "
            f"{_describe(left)} and {_describe(right)}"
        )


def _describe(unit) -> str:
    symbol = getattr(unit, 'symbol', '')
    if symbol:
        return symbol
    name = getattr(unit, 'name', '')
    return name if name else 'dimensionless'
