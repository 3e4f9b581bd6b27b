"""
Exact rational numbers with arbitrary-precision integer terms.

Every scale factor and every magnitude in the unit layer is a ``Rational``.
Construction never reduces to lowest terms (``Rational(2, 4)`` keeps ``2/4``),
but the sign always lives on the numerator. Results of arithmetic are reduced,
so long chains of multiplication and division do not grow their terms.
"""

import decimal
import math
import operator
import sys
import warnings
from typing import Tuple, Union

import numpy as np


_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf

RationalLike = Union['Rational', int, float, decimal.Decimal, np.integer, np.floating]


def _decimal_terms(value: decimal.Decimal) -> Tuple[int, int]:
    """Read a Decimal digit by digit into ``(numerator, denominator)``."""
    if not value.is_finite():
        raise ValueError(f"Cannot represent {value} as a Rational")

    sign, digits, exponent = value.as_tuple()
    numerator = int(''.join(str(d) for d in digits)) if digits else 0

    if exponent >= 0:
        numerator *= 10 ** exponent
        denominator = 1
    else:
        denominator = 10 ** -exponent
        # 456.0 reads as 456/1, not 4560/10
        while denominator > 1 and numerator % 10 == 0:
            numerator //= 10
            denominator //= 10

    return (-numerator if sign else numerator), denominator


def _as_terms(value: RationalLike) -> Tuple[int, int]:
    """
    Normalize a supported scalar into an ``(integer, positive integer)`` pair.

    Integers (Python or numpy) map to ``(n, 1)``. Floating values are read
    through their shortest round-trip decimal representation, so ``3.1415``
    becomes ``31415/10000`` rather than the nearest binary fraction.
    """
    if isinstance(value, Rational):
        return value._numerator, value._denominator
    if isinstance(value, (int, np.integer)):
        return int(value), 1
    if isinstance(value, (float, np.floating)):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Cannot represent {value} as a Rational")
        return _decimal_terms(decimal.Decimal(repr(value)))
    if isinstance(value, decimal.Decimal):
        return _decimal_terms(value)
    raise TypeError(f"Cannot build a Rational from {type(value).__name__}")


def _exact_terms(value) -> Union[Tuple[int, int], None]:
    """Terms used for comparisons: floats compare by their exact binary value."""
    if isinstance(value, (float, np.floating)):
        value = float(value)
        if not math.isfinite(value):
            return None
        return value.as_integer_ratio()
    try:
        return _as_terms(value)
    except (TypeError, ValueError):
        # unsupported types and non-finite Decimals are never equal to a Rational
        return None


def is_rational_like(value) -> bool:
    """True for every scalar type accepted as a Rational operand."""
    return isinstance(value, (Rational, int, np.integer, float, np.floating, decimal.Decimal))


def _coerce(value):
    if isinstance(value, Rational):
        return value
    if is_rational_like(value):
        return Rational(value)
    return NotImplemented


class Rational:
    """
    Arbitrary-precision signed fraction.

    Parameters
    ----------
    numerator : int, float, Decimal, numpy scalar or Rational
        Numerator operand. Defaults to 0.
    denominator : int, float, Decimal, numpy scalar or Rational
        Denominator operand. Defaults to 1.

    Raises
    ------
    ZeroDivisionError
        If the denominator operand is zero.
    ValueError
        If an operand is NaN or infinite.
    TypeError
        If an operand is not a supported scalar.

    Notes
    -----
    Float operands are read differently by arithmetic and by comparison.
    Construction and arithmetic read a float through its shortest decimal
    repr, so ``Rational(3.1415) - 3.1415 == 0``. Comparisons use the float's
    exact binary value, the same as ``fractions.Fraction``, so
    ``Rational(3.1415) == 3.1415`` is False and hashing stays consistent
    with ``float``. Convert explicitly with ``Rational(x)`` to compare a
    float as the decimal it prints as.
    """

    __slots__ = ('_numerator', '_denominator')

    ZERO: 'Rational'
    ONE: 'Rational'

    def __init__(self, numerator: RationalLike = 0, denominator: RationalLike = 1):
        nn, nd = _as_terms(numerator)
        dn, dd = _as_terms(denominator)
        if dn == 0:
            raise ZeroDivisionError(
                f"Rational({numerator!r}, {denominator!r}) has a zero denominator"
            )

        # (nn/nd) / (dn/dd) == (nn*dd) / (nd*dn); the shared part of nd and dd cancels
        common = math.gcd(nd, dd)
        num = nn * (dd // common)
        den = (nd // common) * dn
        if den < 0:
            num, den = -num, -den

        self._numerator = num
        self._denominator = den

    @classmethod
    def _reduced(cls, numerator: int, denominator: int) -> 'Rational':
        if denominator == 0:
            raise ZeroDivisionError("Rational division by zero")
        common = math.gcd(numerator, denominator)
        if denominator < 0:
            common = -common
        result = object.__new__(cls)
        result._numerator = numerator // common
        result._denominator = denominator // common
        return result

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def simplified(self) -> 'Rational':
        """Lowest-terms form with a positive denominator."""
        return Rational._reduced(self._numerator, self._denominator)

    def is_integer(self) -> bool:
        return self._numerator % self._denominator == 0

    def reciprocal(self) -> 'Rational':
        if self._numerator == 0:
            raise ZeroDivisionError("Reciprocal of zero")
        return Rational._reduced(self._denominator, self._numerator)

    def pow(self, n: int) -> 'Rational':
        """
        Raise to an integer power.

        ``pow(0)`` is one for every value, zero included. Negative exponents
        raise the reciprocal, so ``Rational(0).pow(-1)`` fails with
        ``ZeroDivisionError``.
        """
        n = operator.index(n)
        if n == 0:
            return Rational.ONE
        if n < 0:
            return self.reciprocal().pow(-n)
        return Rational._reduced(self._numerator ** n, self._denominator ** n)

    def to_float(self) -> float:
        """Lossy conversion to a binary float."""
        try:
            return self._numerator / self._denominator
        except OverflowError:
            warnings.warn(
                f"{self!r} is too large for a float, saturating to infinity",
                RuntimeWarning,
                stacklevel=2,
            )
            return math.copysign(math.inf, self._numerator)

    def to_decimal_string(self, max_digits: int = 15) -> str:
        """
        Render the simplified value as a decimal literal.

        Terminating fractions print exactly, whole numbers print without a
        fractional part, everything else is rounded half-even to
        ``max_digits`` fractional digits with trailing zeros removed.
        """
        reduced = self.simplified
        numerator, denominator = reduced._numerator, reduced._denominator
        if denominator == 1:
            return str(numerator)

        rest, twos, fives = denominator, 0, 0
        while rest % 2 == 0:
            rest //= 2
            twos += 1
        while rest % 5 == 0:
            rest //= 5
            fives += 1
        digits = max(twos, fives) if rest == 1 else max_digits

        scale = 10 ** digits
        quotient, remainder = divmod(abs(numerator) * scale, denominator)
        if 2 * remainder > denominator or (2 * remainder == denominator and quotient % 2 == 1):
            quotient += 1

        whole, fraction = divmod(quotient, scale)
        fraction_text = str(fraction).rjust(digits, '0').rstrip('0')
        sign = '-' if numerator < 0 and quotient != 0 else ''
        if fraction_text:
            return f"{sign}{whole}.{fraction_text}"
        return f"{sign}{whole}"

    # Arithmetic

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Rational._reduced(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Rational._reduced(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.__sub__(self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Rational._reduced(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if other._numerator == 0:
            raise ZeroDivisionError(f"Cannot divide {self!r} by zero")
        return Rational._reduced(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.__truediv__(self)

    def __pow__(self, exponent, modulo=None):
        if modulo is not None:
            return NotImplemented
        try:
            exponent = operator.index(exponent)
        except TypeError:
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> 'Rational':
        return Rational._reduced(-self._numerator, self._denominator)

    def __pos__(self) -> 'Rational':
        return self

    def __abs__(self) -> 'Rational':
        return Rational._reduced(abs(self._numerator), self._denominator)

    # Comparison

    def _compare(self, other) -> Union[int, None]:
        terms = _exact_terms(other)
        if terms is None:
            return None
        numerator, denominator = terms
        # denominators are positive, so the cross products order like the values
        left = self._numerator * denominator
        right = numerator * self._denominator
        return (left > right) - (left < right)

    def __eq__(self, other):
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __lt__(self, other):
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other):
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other):
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other):
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result >= 0

    def __hash__(self) -> int:
        reduced = self.simplified
        try:
            inverse = pow(reduced._denominator, -1, _HASH_MODULUS)
        except ValueError:
            hash_ = _HASH_INF
        else:
            hash_ = hash(hash(abs(reduced._numerator)) * inverse)
        result = hash_ if reduced._numerator >= 0 else -hash_
        return -2 if result == -1 else result

    # Conversion

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __float__(self) -> float:
        return self.to_float()

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return self.to_decimal_string()


Rational.ZERO = Rational(0)
Rational.ONE = Rational(1)
