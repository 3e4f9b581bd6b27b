from .errors import DimensionalError, IncompatibleUnitsError

__all__ = ['DimensionalError', 'IncompatibleUnitsError']
