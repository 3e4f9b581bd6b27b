from .measure import DIMENSIONLESS, Unit, UnitOfMeasure
from .registry import UnitRegistry, default_registry

__all__ = ['DIMENSIONLESS', 'Unit', 'UnitOfMeasure', 'UnitRegistry', 'default_registry']
