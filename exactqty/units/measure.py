"""
Units of measure with exact scale factors and canonical symbols.

A unit's dimension is always expressed in atomic base units: ``kilometer /
hour`` has the base vector ``[m^1][s^-1]`` and scale ``1000/3600``. The named
units that were multiplied together are tracked separately as ``factors`` and
only feed the display symbol.
"""

import operator
from typing import Any, Optional, Tuple

from ..arithmetic.rational import Rational, RationalLike, is_rational_like
from ..core.errors import IncompatibleUnitsError
from ..dimensions.powers import UnitPowers, merge_powers


_SUPERSCRIPTS = str.maketrans('0123456789-', '⁰¹²³⁴⁵⁶⁷⁸⁹⁻')


def _is_one_dimensional(unit: 'UnitOfMeasure') -> bool:
    powers = unit.base_units.powers
    return len(powers) == 1 and powers[0].power == 1


def _render_symbol(base_units: UnitPowers, factors: Tuple[Tuple[Any, int], ...]) -> str:
    """
    Symbol of a composed unit, or ``""`` when no compact form applies.

    Single factors render as ``m`` or ``dm²``, two first-power factors over
    two distinct atomic units as ``m*s`` or ``km/h``. Anything spanning more
    than two atomic units, two factors of one atomic unit (``km*cm``), or any
    factor without a symbol has no compact form.
    """
    if base_units.is_dimensionless or len(base_units) > 2:
        return ''
    if any(not unit.symbol for unit, _ in factors):
        return ''

    if len(factors) == 1:
        unit, power = factors[0]
        if power == 1:
            return unit.symbol
        if abs(power) >= 2 and _is_one_dimensional(unit):
            return unit.symbol + str(power).translate(_SUPERSCRIPTS)
        return ''

    # an infix pair must span two distinct atomic units; km*cm is plain [m^2]
    if len(factors) == 2 and len(base_units) == 2:
        (left, left_power), (right, right_power) = factors
        if (left_power, right_power) == (1, 1):
            return f"{left.symbol}*{right.symbol}"
        if (left_power, right_power) == (1, -1):
            return f"{left.symbol}/{right.symbol}"

    return ''


class UnitOfMeasure:
    """
    A named unit, or a unit composed from other units.

    ``UnitOfMeasure(name, symbol)`` declares a new base unit.
    ``UnitOfMeasure(name, symbol, reference, factor)`` declares a unit equal
    to ``factor`` times ``reference``; it shares the reference's dimension.
    A unit declared on a dimensionless reference with an overall scale of one
    (for example ``radian``) is a new base unit of its own.

    Units compare by identity: two separately declared ``meter`` base units
    are different dimensions.
    """

    def __init__(self, name: str, symbol: str,
                 reference: Optional['UnitOfMeasure'] = None,
                 factor: Optional[RationalLike] = None):
        if name is None:
            raise ValueError("Unit name must not be None")
        if symbol is None:
            raise ValueError("Unit symbol must not be None")
        if reference is None and factor is not None:
            raise ValueError(f"Scale factor for '{name}' requires a reference unit")

        self._name = name
        self._symbol = symbol
        self._factors = ((self, 1),)
        self._is_composed = False

        if reference is None:
            self._scale = Rational.ONE
            self._is_base_unit = True
            self._base_units = UnitPowers(self, 1)
            return

        if not isinstance(reference, UnitOfMeasure):
            raise TypeError(f"Reference of '{name}' must be a UnitOfMeasure, got {type(reference).__name__}")
        factor = Rational(1 if factor is None else factor)
        if not factor:
            raise ValueError(f"Scale factor for '{name}' must not be zero")

        self._scale = reference.scale * factor
        self._is_base_unit = reference.is_dimensionless and self._scale == Rational.ONE
        if self._is_base_unit:
            self._base_units = UnitPowers(self, 1)
        else:
            self._base_units = reference.base_units

    @classmethod
    def _compose(cls, scale: Rational, base_units: UnitPowers, factors) -> 'UnitOfMeasure':
        unit = object.__new__(cls)
        unit._scale = scale
        unit._base_units = base_units
        unit._factors = tuple(merge_powers(factors))
        unit._is_base_unit = False
        unit._is_composed = True
        unit._name = str(base_units)
        unit._symbol = _render_symbol(base_units, unit._factors)
        return unit

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def scale(self) -> Rational:
        return self._scale

    @property
    def base_units(self) -> UnitPowers:
        return self._base_units

    @property
    def factors(self) -> Tuple[Tuple['UnitOfMeasure', int], ...]:
        """Named units this unit was composed from, in canonical order."""
        return self._factors

    @property
    def is_composed(self) -> bool:
        """True for units produced by multiplication, division or powers."""
        return self._is_composed

    @property
    def is_base_unit(self) -> bool:
        return self._is_base_unit

    @property
    def is_dimensionless(self) -> bool:
        return self._base_units.is_dimensionless

    def is_compatible(self, other: 'UnitOfMeasure') -> bool:
        return self._base_units == other.base_units

    def conversion_factor(self, other: 'UnitOfMeasure') -> Rational:
        """Number of ``other`` in one of this unit."""
        if not self.is_compatible(other):
            raise IncompatibleUnitsError('convert', self, other)
        return self._scale / other.scale

    def pow(self, n: int) -> 'UnitOfMeasure':
        n = operator.index(n)
        return UnitOfMeasure._compose(
            self._scale.pow(n),
            self._base_units.pow(n),
            [(unit, power * n) for unit, power in self._factors] if n else [],
        )

    def inverse(self) -> 'UnitOfMeasure':
        return self.pow(-1)

    def __mul__(self, other):
        if isinstance(other, UnitOfMeasure):
            return UnitOfMeasure._compose(
                self._scale * other.scale,
                self._base_units * other.base_units,
                self._factors + other.factors,
            )
        if is_rational_like(other):
            from ..quantities.value import Value
            return Value(other, self)
        return NotImplemented

    def __rmul__(self, other):
        if is_rational_like(other):
            from ..quantities.value import Value
            return Value(other, self)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, UnitOfMeasure):
            return UnitOfMeasure._compose(
                self._scale / other.scale,
                self._base_units / other.base_units,
                self._factors + tuple((unit, -power) for unit, power in other.factors),
            )
        if is_rational_like(other):
            from ..quantities.value import Value
            return Value(Rational.ONE / other, self)
        return NotImplemented

    def __rtruediv__(self, other):
        if is_rational_like(other):
            from ..quantities.value import Value
            return Value(other, self.inverse())
        return NotImplemented

    def __pow__(self, n):
        try:
            n = operator.index(n)
        except TypeError:
            return NotImplemented
        return self.pow(n)

    def __str__(self) -> str:
        return self._symbol or self._name

    def __repr__(self) -> str:
        return f"Unit({self._symbol or self._name})"


Unit = UnitOfMeasure

DIMENSIONLESS = UnitOfMeasure._compose(Rational.ONE, UnitPowers(), [])
