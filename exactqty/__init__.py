"""
exactqty - Exact physical-quantity arithmetic
=============================================

Quantities pair an exact rational magnitude with a unit of measure. All
arithmetic checks dimensions and never loses precision:

- Arbitrary-precision rationals read from decimal literals
- Dimension vectors over atomic base units
- Units composed by multiplication, division and integer powers
- Dimensionally checked quantities with exact conversion
"""

__version__ = "0.1.0"

from .arithmetic import Rational
from .core.errors import DimensionalError, IncompatibleUnitsError
from .dimensions import UnitPower, UnitPowers
from .quantities import Value
from .units import DIMENSIONLESS, Unit, UnitOfMeasure, UnitRegistry, default_registry

__all__ = [
    # Numbers
    'Rational',

    # Dimensions
    'UnitPower', 'UnitPowers',

    # Units
    'Unit', 'UnitOfMeasure', 'DIMENSIONLESS', 'UnitRegistry', 'default_registry',

    # Quantities
    'Value',

    # Errors
    'DimensionalError', 'IncompatibleUnitsError',
]
