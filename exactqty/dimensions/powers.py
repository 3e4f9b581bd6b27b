"""
Dimension vectors: products of atomic units raised to integer powers.
"""

import operator
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union


def merge_powers(pairs: Iterable[Tuple[Any, int]]) -> List[Tuple[Any, int]]:
    """
    Stable merge of ``(unit, power)`` pairs.

    Powers of the same unit (by identity) are summed and zero totals dropped.
    The result lists positive powers before negative ones; within each group
    units keep the order in which they first appeared in ``pairs``.
    """
    totals = {}
    for unit, power in pairs:
        totals[unit] = totals.get(unit, 0) + power

    positive = [(unit, power) for unit, power in totals.items() if power > 0]
    negative = [(unit, power) for unit, power in totals.items() if power < 0]
    return positive + negative


@dataclass(frozen=True)
class UnitPower:
    """One atomic unit raised to a nonzero integer power."""
    unit: Any
    power: int

    def __post_init__(self):
        try:
            power = operator.index(self.power)
        except TypeError:
            raise TypeError(
                f"Unit power must be an integer, got {type(self.power).__name__}"
            ) from None
        object.__setattr__(self, 'power', power)

        if not getattr(self.unit, 'is_base_unit', False):
            raise ValueError(f"{self.unit!r} is not a base unit")
        if power == 0:
            raise ValueError(f"Power of {self.unit!r} must not be zero")

    def __repr__(self) -> str:
        return f"UnitPower({self.unit!r}, {self.power})"


class UnitPowers:
    """
    Canonical dimension vector.

    Semantically a mapping from atomic unit to nonzero exponent. Equality and
    hashing ignore order; iteration follows the canonical order produced by
    :func:`merge_powers`.

    Parameters
    ----------
    entries : base unit, iterable of UnitPower or (unit, power) pairs, optional
        Entries to merge. When ``power`` is given, ``entries`` is a single
        base unit.
    power : int, optional
        Exponent for the single-unit form ``UnitPowers(meter, 1)``.
    """

    __slots__ = ('_powers',)

    def __init__(self, entries: Union[Iterable, Any, None] = None, power: Optional[int] = None):
        if power is not None:
            entries = [UnitPower(entries, power)]
        elif entries is None:
            entries = ()

        pairs = []
        for entry in entries:
            if not isinstance(entry, UnitPower):
                entry = UnitPower(*entry)
            pairs.append((entry.unit, entry.power))

        self._powers = tuple(UnitPower(unit, p) for unit, p in merge_powers(pairs))

    @classmethod
    def _from_pairs(cls, pairs: Iterable[Tuple[Any, int]]) -> 'UnitPowers':
        result = object.__new__(cls)
        result._powers = tuple(UnitPower(unit, p) for unit, p in merge_powers(pairs))
        return result

    def _pairs(self) -> Iterator[Tuple[Any, int]]:
        return ((p.unit, p.power) for p in self._powers)

    @property
    def powers(self) -> Tuple[UnitPower, ...]:
        return self._powers

    @property
    def is_dimensionless(self) -> bool:
        return not self._powers

    def power_of(self, unit) -> int:
        """Exponent of ``unit`` in this vector, 0 when absent."""
        for entry in self._powers:
            if entry.unit is unit:
                return entry.power
        return 0

    def __len__(self) -> int:
        return len(self._powers)

    def __iter__(self) -> Iterator[UnitPower]:
        return iter(self._powers)

    def __getitem__(self, index: int) -> UnitPower:
        return self._powers[index]

    def __mul__(self, other: 'UnitPowers') -> 'UnitPowers':
        if not isinstance(other, UnitPowers):
            return NotImplemented
        return UnitPowers._from_pairs(list(self._pairs()) + list(other._pairs()))

    def __truediv__(self, other: 'UnitPowers') -> 'UnitPowers':
        if not isinstance(other, UnitPowers):
            return NotImplemented
        inverted = [(unit, -p) for unit, p in other._pairs()]
        return UnitPowers._from_pairs(list(self._pairs()) + inverted)

    def pow(self, n: int) -> 'UnitPowers':
        n = operator.index(n)
        if n == 0:
            return UnitPowers()
        return UnitPowers._from_pairs((unit, p * n) for unit, p in self._pairs())

    def __pow__(self, n: int) -> 'UnitPowers':
        return self.pow(n)

    def inverse(self) -> 'UnitPowers':
        return self.pow(-1)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UnitPowers):
            return NotImplemented
        return frozenset(self._pairs()) == frozenset(other._pairs())

    def __hash__(self) -> int:
        return hash(frozenset(self._pairs()))

    def __str__(self) -> str:
        return ''.join(
            f"[{p.unit.symbol or p.unit.name}^{p.power}]" for p in self._powers
        )

    def __repr__(self) -> str:
        return f"UnitPowers({list(self._powers)!r})"
