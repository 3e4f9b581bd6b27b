from .rational import Rational, is_rational_like

__all__ = ['Rational', 'is_rational_like']
