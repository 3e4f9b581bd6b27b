"""
Read-only registries of predefined units.

A registry is built once from already constructed units and never changes
afterwards. Units are looked up by name or symbol::

    >>> units = default_registry()
    >>> units.meter is units['m']
    True
"""

import functools
import warnings
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional

from ..arithmetic.rational import Rational
from .measure import DIMENSIONLESS, UnitOfMeasure


class UnitRegistry:
    """
    Immutable lookup table of units keyed by name and by symbol.

    Parameters
    ----------
    definitions : iterable of UnitOfMeasure, optional
        Units to register, in priority order. When two units claim the same
        name or symbol the first one keeps it and a ``UserWarning`` is issued.
    """

    def __init__(self, definitions: Optional[Iterable[UnitOfMeasure]] = None):
        units = []
        lookup = {}

        for unit in definitions or ():
            if not isinstance(unit, UnitOfMeasure):
                raise TypeError(f"Cannot register {type(unit).__name__} as a unit")
            if any(known is unit for known in units):
                continue
            units.append(unit)

            for key in (unit.name, unit.symbol):
                if not key:
                    continue
                existing = lookup.get(key)
                if existing is None:
                    lookup[key] = unit
                elif existing is not unit:
                    warnings.warn(
                        f"Redefining '{key}' ({unit!r}) is ignored, keeping {existing!r}",
                        UserWarning,
                        stacklevel=2,
                    )

        object.__setattr__(self, '_units', tuple(units))
        object.__setattr__(self, '_lookup', MappingProxyType(lookup))

    def __setattr__(self, name, value):
        raise AttributeError("UnitRegistry is read-only")

    def __delattr__(self, name):
        raise AttributeError("UnitRegistry is read-only")

    @property
    def lookup(self) -> Mapping[str, UnitOfMeasure]:
        """Read-only view of every name and symbol."""
        return self._lookup

    def get(self, key: str, default: Optional[UnitOfMeasure] = None) -> Optional[UnitOfMeasure]:
        return self._lookup.get(key, default)

    def __getitem__(self, key: str) -> UnitOfMeasure:
        try:
            return self._lookup[key]
        except KeyError:
            raise KeyError(f"Unknown unit: {key!r}") from None

    def __getattr__(self, name: str) -> UnitOfMeasure:
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._lookup[name]
        except KeyError:
            raise AttributeError(f"Unknown unit: {name!r}") from None

    def __contains__(self, key) -> bool:
        if isinstance(key, UnitOfMeasure):
            return any(unit is key for unit in self._units)
        return key in self._lookup

    def __iter__(self) -> Iterator[UnitOfMeasure]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"UnitRegistry({len(self._units)} units)"


def _default_definitions() -> List[UnitOfMeasure]:
    meter = UnitOfMeasure("meter", "m")
    kilogram = UnitOfMeasure("kilogram", "kg")
    second = UnitOfMeasure("second", "s")
    ampere = UnitOfMeasure("ampere", "A")
    kelvin = UnitOfMeasure("kelvin", "K")
    mole = UnitOfMeasure("mole", "mol")
    candela = UnitOfMeasure("candela", "cd")

    # distinct dimensionless dimensions
    radian = UnitOfMeasure("radian", "rad", DIMENSIONLESS)
    steradian = UnitOfMeasure("steradian", "sr", DIMENSIONLESS)

    gram = UnitOfMeasure("gram", "g", kilogram, Rational(1, 1000))
    kilometer = UnitOfMeasure("kilometer", "km", meter, 1000)
    decimeter = UnitOfMeasure("decimeter", "dm", meter, Rational(1, 10))
    centimeter = UnitOfMeasure("centimeter", "cm", meter, Rational(1, 100))
    millimeter = UnitOfMeasure("millimeter", "mm", meter, Rational(1, 1000))

    minute = UnitOfMeasure("minute", "min", second, 60)
    hour = UnitOfMeasure("hour", "h", minute, 60)

    inch = UnitOfMeasure("inch", "in", centimeter, Rational(254, 100))
    foot = UnitOfMeasure("foot", "ft", inch, 12)
    yard = UnitOfMeasure("yard", "yd", foot, 3)
    mile = UnitOfMeasure("mile", "mi", yard, 1760)

    return [
        meter, kilogram, second, ampere, kelvin, mole, candela,
        radian, steradian,
        gram, kilometer, decimeter, centimeter, millimeter,
        minute, hour,
        inch, foot, yard, mile,
    ]


@functools.lru_cache(maxsize=None)
def default_registry() -> UnitRegistry:
    """Registry of SI base units and a few common scaled units, built once."""
    return UnitRegistry(_default_definitions())
