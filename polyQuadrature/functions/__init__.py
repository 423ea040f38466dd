from .base_class import Function
from .polynomial import PolynomialFunction

__all__ = [
    "Function",
    "PolynomialFunction",
]
