"""
Physical quantities with exact magnitudes and dimensional checking.
"""

import operator
from typing import Tuple, Union

from ..arithmetic.rational import Rational, RationalLike, is_rational_like
from ..core.errors import IncompatibleUnitsError
from ..dimensions.powers import UnitPowers
from ..units.measure import DIMENSIONLESS, UnitOfMeasure


class Value:
    """
    A physical quantity: the magnitude ``x`` expressed in ``unit``.

    Addition and subtraction require matching dimensions and return the left
    operand's unit. Multiplication and division compose units without
    rescaling the magnitude.

    Args:
        x: Magnitude, any scalar accepted by :class:`Rational`
        unit: Unit the magnitude is expressed in
    """

    __slots__ = ('_x', '_unit')

    def __init__(self, x: RationalLike, unit: UnitOfMeasure):
        if not isinstance(unit, UnitOfMeasure):
            raise TypeError(f"Value unit must be a UnitOfMeasure, got {type(unit).__name__}")
        self._x = x if isinstance(x, Rational) else Rational(x)
        self._unit = unit

    @property
    def x(self) -> Rational:
        return self._x

    @property
    def magnitude(self) -> Rational:
        """Return the numerical value without units."""
        return self._x

    @property
    def unit(self) -> UnitOfMeasure:
        return self._unit

    @property
    def base_magnitude(self) -> Rational:
        """Magnitude in atomic base units, ``x * unit.scale``."""
        return self._x * self._unit.scale

    @property
    def inverse(self) -> 'Value':
        return Value(self._x.reciprocal(), self._unit.inverse())

    def is_compatible(self, other: Union['Value', UnitOfMeasure]) -> bool:
        unit = other.unit if isinstance(other, Value) else other
        return self._unit.is_compatible(unit)

    def check_dimensions(self, expected: UnitPowers) -> bool:
        """Check if quantity has the expected base-unit vector."""
        return self._unit.base_units == expected

    def convert_to(self, unit: UnitOfMeasure) -> 'Value':
        """Convert quantity to a different unit of the same dimension."""
        return Value(self._x * self._unit.conversion_factor(unit), unit)

    to = convert_to

    def to_float(self) -> float:
        return self._x.to_float()

    def pow(self, n: int) -> 'Value':
        return Value(self._x.pow(n), self._unit.pow(n))

    def _check_compatible(self, operation: str, other: 'Value') -> None:
        if not self._unit.is_compatible(other.unit):
            raise IncompatibleUnitsError(operation, self._unit, other.unit)

    def __add__(self, other: 'Value') -> 'Value':
        if not isinstance(other, Value):
            raise TypeError("Can only add Value to Value")
        self._check_compatible('add', other)
        ratio = other.unit.scale / self._unit.scale
        return Value(self._x + other.x * ratio, self._unit)

    def __sub__(self, other: 'Value') -> 'Value':
        if not isinstance(other, Value):
            raise TypeError("Can only subtract Value from Value")
        self._check_compatible('subtract', other)
        ratio = other.unit.scale / self._unit.scale
        return Value(self._x - other.x * ratio, self._unit)

    def __mul__(self, other):
        if isinstance(other, Value):
            return Value(self._x * other.x, self._unit * other.unit)
        if isinstance(other, UnitOfMeasure):
            return Value(self._x, self._unit * other)
        if is_rational_like(other):
            return Value(self._x * other, self._unit)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, UnitOfMeasure):
            return Value(self._x, other * self._unit)
        if is_rational_like(other):
            return Value(other * self._x, self._unit)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Value):
            return Value(self._x / other.x, self._unit / other.unit)
        if isinstance(other, UnitOfMeasure):
            return Value(self._x, self._unit / other)
        if is_rational_like(other):
            return Value(self._x / other, self._unit)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, UnitOfMeasure):
            return Value(self._x.reciprocal(), other / self._unit)
        if is_rational_like(other):
            return Value(other / self._x, self._unit.inverse())
        return NotImplemented

    def __pow__(self, n):
        try:
            n = operator.index(n)
        except TypeError:
            return NotImplemented
        return self.pow(n)

    def __neg__(self) -> 'Value':
        return Value(-self._x, self._unit)

    def __pos__(self) -> 'Value':
        return self

    def __abs__(self) -> 'Value':
        return Value(abs(self._x), self._unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if not self._unit.is_compatible(other.unit):
            return False
        return self.base_magnitude == other.base_magnitude

    def __hash__(self) -> int:
        return hash((self._unit.base_units, self.base_magnitude))

    def _ordered(self, other: 'Value') -> Tuple[Rational, Rational]:
        self._check_compatible('compare', other)
        return self.base_magnitude, other.base_magnitude

    def __lt__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        left, right = self._ordered(other)
        return left < right

    def __le__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        left, right = self._ordered(other)
        return left <= right

    def __gt__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        left, right = self._ordered(other)
        return left > right

    def __ge__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        left, right = self._ordered(other)
        return left >= right

    def __float__(self) -> float:
        if not self._unit.is_dimensionless:
            raise IncompatibleUnitsError('convert', self._unit, DIMENSIONLESS)
        return self.base_magnitude.to_float()

    def _display_parts(self) -> Tuple[Rational, str]:
        # a composed unit without a symbol is named in atomic base units
        if self._unit.symbol:
            return self._x, self._unit.symbol
        if self._unit.is_composed:
            return self.base_magnitude, self._unit.name
        return self._x, self._unit.name

    def __str__(self) -> str:
        magnitude, unit_text = self._display_parts()
        if unit_text:
            return f"{magnitude} {unit_text}"
        return str(magnitude)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        magnitude, unit_text = self._display_parts()
        text = format(magnitude.to_float(), format_spec)
        return f"{text} {unit_text}" if unit_text else text

    def __repr__(self) -> str:
        return f"Value({self._x!r}, {str(self._unit)!r})"
