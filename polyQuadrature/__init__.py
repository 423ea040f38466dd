from . import functions
from . import integrators
from . import example_problems
from . import compare_integrators
from .functions import Function, PolynomialFunction
from .integrators import Integrator, AnalyticalIntegrator, RiemannIntegrator
from .utils import ResultDict

__all__ = [
    "functions",
    "integrators",
    "example_problems",
    "compare_integrators",
    "Function",
    "PolynomialFunction",
    "Integrator",
    "AnalyticalIntegrator",
    "RiemannIntegrator",
    "ResultDict",
]
