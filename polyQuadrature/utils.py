from typing import Any, Dict, Union
from collections.abc import MutableMapping


def format_number(value, float_format: str = "{:g}") -> str:
    """
    Render a number the way the tables and labels print it.

    Parameters
    ----------
    value : int or float
        the number to render
    float_format : str
        a ``str.format`` template with a single field,
        by default the shortest general format ``'{:g}'``

    Example
    -------
    >>> format_number(2.0)
    '2'
    >>> format_number(0.625)
    '0.625'
    """
    return float_format.format(float(value))


class ResultDict(MutableMapping):
    """
    Result of calling an Integrator on a Problem.

    Keys
    ----
    estimate : float
        the integral over [problem.low, problem.high], always present
        and never deletable
    n_evals : int
        function evaluations spent, only with return_N=True:
        2 for AnalyticalIntegrator (the antiderivative at both bounds),
        2 * int((high - low) / h) for RiemannIntegrator

    Other keys are stored unchecked.
    """

    def __init__(self, estimate: float, **kwargs):
        """
        Example
        -------
        >>> from polyQuadrature.example_problems import SparsePolynomial
        >>> from polyQuadrature.integrators import RiemannIntegrator
        >>> result = RiemannIntegrator(h=0.001)(SparsePolynomial(), return_N=True)
        >>> result['n_evals']
        2000
        >>> ResultDict(estimate=23)
        Traceback (most recent call last):
        TypeError: integral estimate must be a float, got int
        """
        if not isinstance(estimate, float):
            raise TypeError(
                f"integral estimate must be a float, got {type(estimate).__name__}"
            )
        self._data: Dict[str, Any] = {"estimate": estimate}
        self.update(kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key == "estimate":
            if not isinstance(value, float):
                raise TypeError(
                    f"integral estimate must be a float, got {type(value).__name__}"
                )
        elif key == "n_evals":
            if not isinstance(value, int):
                raise TypeError("evaluation count 'n_evals' must be an int, "
                                f"got {type(value).__name__}")

        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key == "estimate":
            raise KeyError("a result always keeps its 'estimate'")
        del self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return repr(self._data)

    def update(self, other: Union[Dict[str, Any], "ResultDict"]) -> None:
        for key, value in other.items():
            self[key] = value
