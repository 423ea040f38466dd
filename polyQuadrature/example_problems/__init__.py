from .base_class import Problem
from .polynomial_problems import (
    PolynomialProblem,
    SparsePolynomial,
    Quadratic,
)

__all__ = [
    "Problem",
    "PolynomialProblem",
    "SparsePolynomial",
    "Quadratic",
]
