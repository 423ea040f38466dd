from abc import ABC

import numpy as np

from ..functions import Function


class Problem(ABC):
    '''
    base class for integration problems

    Attributes
    ----------
    function : Function
        the function being integrated
    low, high : float
        the lower and upper bound of integration
    answer : float
        the True solution to int_low^high function(x) dx,
        None when subclasses do not know it
    '''
    def __init__(self, function: Function, low: float, high: float):
        """
        Arguments
        ---------
        function : Function
            the integrand
        low, high : int or float
            the bounds of the integration interval
        """
        if not isinstance(function, Function):
            raise TypeError(
                f"function must be a Function, got {type(function).__name__}"
            )
        if not (np.isfinite(low) and np.isfinite(high)):
            raise ValueError(
                f"bounds must be finite, got low={low}, high={high}"
            )
        self.function = function
        self.low = float(low)
        self.high = float(high)
        self.answer = None

    def integrand(self, x):
        """the function being integrated, evaluated at x"""
        return self.function.evaluate(x)

    def __str__(self) -> str:
        return f'Problem(f={self.function}, low={self.low}, high={self.high})'
