from abc import ABC, abstractmethod

from ..functions import Function
from ..example_problems import Problem
from ..utils import ResultDict


class Integrator(ABC):
    """
    Abstract base class for integrators.

    Subclasses implement ``integrate``, ``describe`` and ``count_evals``.
    Calling an integrator on a Problem returns a ResultDict.
    """
    name = 'Integrator'

    @abstractmethod
    def integrate(self, f: Function, a: float, b: float) -> float:
        """
        Definite integral of f from a to b.

        Parameters
        ----------
        f : Function
            the integrand
        a, b : float
            the bounds of integration

        Returns
        -------
        float
            the integral estimate
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        pass

    @abstractmethod
    def count_evals(self, a: float, b: float) -> int:
        """number of evaluations ``integrate(f, a, b)`` makes"""
        pass

    def __call__(self, problem: Problem, return_N: bool = False) -> ResultDict:
        """
        Perform integration on the given problem.

        Parameters
        ----------
        problem : Problem
            The problem to be integrated.
        return_N : bool
            whether return number of evaluations or not

        Returns
        -------
        ResultDict
            - estimate (float) : estimated integral value
            - n_evals (int) : number of function evaluations,
              only when return_N is True
        """
        estimate = float(self.integrate(problem.function,
                                        problem.low, problem.high))
        if return_N:
            return ResultDict(estimate=estimate,
                              n_evals=self.count_evals(problem.low,
                                                       problem.high))
        return ResultDict(estimate=estimate)

    def __str__(self) -> str:
        return self.describe()
