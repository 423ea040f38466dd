from .base_class import Problem
from ..functions import PolynomialFunction


class PolynomialProblem(Problem):
    def __init__(self, coefficients, low: float, high: float):
        """
        Integral of a polynomial over [low, high].

        Parameters
        ----------
        coefficients : list or tuple or numpy.ndarray
            coefficients of the polynomial, index = power of x
        low, high : float
            bounds of integration
        """
        super().__init__(PolynomialFunction(coefficients), low, high)
        self.answer = self.exact_integral(self.low, self.high)

    def exact_integral(self, low, high):
        """
        sum_i c_i / (i+1) * (high^(i+1) - low^(i+1))

        Parameters
        ----------
        low, high : float
            bounds of integration

        Returns
        -------
        float
            The value of the integral.
        """
        integral_sum = 0.0
        for i, c in enumerate(self.function.coefficients):
            integral_sum += c / (i + 1) * (high ** (i + 1) - low ** (i + 1))
        return float(integral_sum)

    def __str__(self) -> str:
        return (f"PolynomialProblem({self.function.describe()}, "
                f"low={self.low}, high={self.high})")


class SparsePolynomial(PolynomialProblem):
    def __init__(self, low: float = 0.5, high: float = 1.5):
        """
        2 + 4x^3 + 5x^7 on [0.5, 1.5] unless other bounds are given
        """
        super().__init__([2, 0, 0, 4, 0, 0, 0, 5], low, high)

    def __str__(self) -> str:
        return f"SparsePolynomial(low={self.low}, high={self.high})"


class Quadratic(PolynomialProblem):
    def __init__(self):
        """
        x^2 on [-1.0, 1.0]
        """
        super().__init__([0, 0, 1], low=-1.0, high=1.0)

    def __str__(self) -> str:
        return "Quadratic()"
