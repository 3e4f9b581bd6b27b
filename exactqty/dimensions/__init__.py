from .powers import UnitPower, UnitPowers, merge_powers

__all__ = ['UnitPower', 'UnitPowers', 'merge_powers']
