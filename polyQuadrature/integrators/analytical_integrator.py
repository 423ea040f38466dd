from .base_class import Integrator
from ..functions import Function


class AnalyticalIntegrator(Integrator):
    '''
    exact integral from the antiderivative of the integrand,
    F(b) - F(a). Reversed bounds give the negated integral.

    Example
    -------
    >>> from polyQuadrature.functions import PolynomialFunction
    >>> from polyQuadrature.integrators import AnalyticalIntegrator
    >>> integ = AnalyticalIntegrator()
    >>> integ.integrate(PolynomialFunction([0, 0, 3]), 0.0, 2.0)
    8.0
    '''
    def __init__(self):
        self.name = 'Analytical'

    def integrate(self, f: Function, a: float, b: float) -> float:
        antiderivative = f.antiderivative()
        return antiderivative.evaluate(b) - antiderivative.evaluate(a)

    def count_evals(self, a: float, b: float) -> int:
        return 2

    def describe(self) -> str:
        return self.name
