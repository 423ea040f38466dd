import numpy as np
from numpy.polynomial.polynomial import polyval

from .base_class import Function
from ..utils import format_number


class PolynomialFunction(Function):
    def __init__(self, coefficients):
        """
        Polynomial c_0 + c_1 x + c_2 x^2 + ...

        Parameters
        ----------
        coefficients : list or tuple or numpy.ndarray
            one dimensional sequence of real coefficients,
            the coefficient at index i multiplies x^i.
            May be empty, which gives the zero function.
            Trailing zeros are kept as given.

        Example
        -------
        >>> from polyQuadrature.functions import PolynomialFunction
        >>> f = PolynomialFunction([2, 0, 0, 4])
        >>> f.evaluate(1.0)
        6.0
        >>> f.describe()
        '2 + 0x^1 + 0x^2 + 4x^3'
        """
        if not isinstance(coefficients, (list, tuple, np.ndarray)):
            raise TypeError(
                "coefficients must be a list, tuple or numpy.ndarray, "
                f"got {type(coefficients).__name__}"
            )
        coefficients = np.array(coefficients, dtype=float)
        if coefficients.ndim != 1:
            raise ValueError(
                "coefficients must be one dimensional, "
                f"got shape {coefficients.shape}"
            )
        coefficients.flags.writeable = False
        self._coefficients = coefficients

    @property
    def coefficients(self) -> np.ndarray:
        """read-only array of coefficients, index = power of x"""
        return self._coefficients

    @property
    def degree(self) -> int:
        return self._coefficients.size - 1

    def evaluate(self, x):
        """
        sum of c_i * x^i, with x^0 = 1 for every x including 0.

        Parameters
        ----------
        x : float or numpy.ndarray

        Returns
        -------
        float, or numpy.ndarray of the same shape as x
        """
        xs = np.asarray(x, dtype=float)
        if self._coefficients.size == 0:
            values = np.zeros_like(xs)
        else:
            # Horner's scheme, memory stays proportional to x
            values = np.asarray(polyval(xs, self._coefficients))
        if values.ndim == 0:
            return float(values)
        return values

    def antiderivative(self) -> "PolynomialFunction":
        new_coefficients = np.zeros(self._coefficients.size + 1)
        new_coefficients[1:] = (
            self._coefficients / np.arange(1, self._coefficients.size + 1)
        )
        return PolynomialFunction(new_coefficients)

    def describe(self, float_format: str = "{:g}") -> str:
        """
        Label of the polynomial, e.g. '2 + 0x^1 + -3x^2'.

        Parameters
        ----------
        float_format : str
            template used for each coefficient.
            Default '{:g}', six significant digits,
            so 1234567 is printed as 1.23457e+06
        """
        # zero and negative coefficients are printed as they are
        terms = []
        for i, c in enumerate(self._coefficients):
            if i == 0:
                terms.append(format_number(c, float_format))
            else:
                terms.append(f" + {format_number(c, float_format)}x^{i}")
        return "".join(terms)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PolynomialFunction):
            return NotImplemented
        return np.array_equal(self._coefficients, other._coefficients)

    def __hash__(self) -> int:
        return hash(tuple(self._coefficients.tolist()))

    def __repr__(self) -> str:
        return f"PolynomialFunction({self._coefficients.tolist()})"
