import warnings
import numpy as np

from .base_class import Integrator
from ..functions import Function


class RiemannIntegrator(Integrator):
    def __init__(self, h: float = 0.001, chunk_size: int = 1_000_000):
        '''
        Riemann sum using the trapezoidal rule on a fixed grid:
            - split [a, b] into int((b - a) / h) steps of width h
            - average f at both ends of each step
            - sum the trapezoid areas

        The last partial step narrower than h is left out,
        and b <= a gives 0.0, as do NaN or infinite bounds.

        Attributes
        ----------
        h : float
            width of each step, must be positive.
            Default: 0.001
        chunk_size : int
            number of steps evaluated per block of the grid,
            bounds the memory used for long intervals.
            Default: 1_000_000

        Example
        -------
        >>> from polyQuadrature.functions import PolynomialFunction
        >>> from polyQuadrature.integrators import RiemannIntegrator
        >>> integ = RiemannIntegrator(h=0.01)
        >>> estimate = integ.integrate(PolynomialFunction([0, 1]), 0.0, 1.0)
        '''
        if not np.isfinite(h) or h <= 0:
            raise ValueError(f"h must be a positive finite number, got {h}")
        if not isinstance(chunk_size, int) or chunk_size < 1:
            raise ValueError(f"chunk_size must be a positive int, got {chunk_size}")
        self.h = float(h)
        self.chunk_size = chunk_size
        self.name = 'Riemann Sum'

    def n_steps(self, a: float, b: float) -> int:
        """
        number of whole steps of width h in [a, b], truncated toward zero.
        0 when (b - a) / h is NaN or infinite.
        """
        steps = (b - a) / self.h
        if not np.isfinite(steps):
            return 0
        return int(steps)

    def integrate(self, f: Function, a: float, b: float) -> float:
        n = self.n_steps(a, b)

        if b < a:
            warnings.warn(
                f'lower bound {a} is above upper bound {b}; '
                'RiemannIntegrator returns 0.0 where the analytical '
                'integral would be negated', RuntimeWarning)

        if n <= 0:
            return 0.0

        total = 0.0
        for start in range(0, n, self.chunk_size):
            stop = min(start + self.chunk_size, n)
            x1 = a + np.arange(start, stop) * self.h
            x2 = x1 + self.h
            y1 = f.evaluate(x1)
            y2 = f.evaluate(x2)
            total += float(np.sum((x2 - x1) * ((y2 + y1) / 2)))

        return total

    def count_evals(self, a: float, b: float) -> int:
        return 2 * max(self.n_steps(a, b), 0)

    def describe(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"RiemannIntegrator(h={self.h})"
