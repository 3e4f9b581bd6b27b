from .value import Value

__all__ = ['Value']
