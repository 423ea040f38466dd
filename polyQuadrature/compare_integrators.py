from .example_problems import Problem
from .functions import Function
from .integrators import Integrator
from .utils import format_number

import sys, time

import numpy as np
from typing import List, Tuple, Optional, TextIO
from traceback import print_exc


def table_rows(functions: List[Function], integrators: List[Integrator],
               a: float, b: float) -> List[Tuple[str, List[float]]]:
    """
    Integrate every function with every integrator on [a, b].

    Returns
    -------
    List[Tuple[str, List[float]]]
        one (label, results) pair per function, in the given order,
        results listed in the order of integrators
    """
    return [(f.describe(), [integrator.integrate(f, a, b)
                            for integrator in integrators])
            for f in functions]


def format_table(functions: List[Function], integrators: List[Integrator],
                 a: float, b: float, float_format: str = '{:g}',
                 separator: str = '\t', header: bool = False) -> str:
    """
    Text table comparing integrators on a list of functions.

    Each line is the function label, then ``separator``,
    then ``<result>;`` for every integrator.

    Parameters
    ----------
    functions : List[Function]
        the functions to integrate
    integrators : List[Integrator]
        the integration methods compared
    a, b : float
        bounds of integration, shared by all rows
    float_format : str
        template used to render each result.
        Default '{:g}'
    separator : str
        put between the label and the results.
        Default tab
    header : bool
        if True, the first line lists the integrator labels

    Returns
    -------
    str
        the table, every line ending in a newline
    """
    lines = []
    if header:
        lines.append(separator + ''.join(
            f'{integrator.describe()};' for integrator in integrators))

    for label, results in table_rows(functions, integrators, a, b):
        lines.append(label + separator + ''.join(
            f'{format_number(result, float_format)};' for result in results))

    return ''.join(line + '\n' for line in lines)


def print_table(functions: List[Function], integrators: List[Integrator],
                a: float, b: float, file: Optional[TextIO] = None,
                **kwargs) -> None:
    """write ``format_table(functions, integrators, a, b, **kwargs)`` to file,
    standard output by default"""
    if file is None:
        file = sys.stdout
    file.write(format_table(functions, integrators, a, b, **kwargs))


def compare_integrators(integrators: List[Integrator], problem: Problem,
                        verbose: int = 1) -> dict:
    """
    Run each integrator on the problem and compare with the true answer.

    Parameters
    ----------
    integrators : List[Integrator]
        the integrators to compare
    problem : Problem
        the problem, problem.answer must be known
    verbose : int
        0 prints nothing, 1 prints a summary per integrator

    Returns
    -------
    dict
        integrator name -> {'estimate', 'error', 'n_evals', 'time'};
        error is relative (in %) when the answer is non-zero,
        absolute otherwise
    """
    if problem.answer is None:
        raise ValueError(f'{problem} has no known answer to compare with')

    results = {}

    for i, integrator in enumerate(integrators):
        integrator_name = getattr(integrator, 'name', f'integrator[{i}]')

        start_time = time.time()
        try:
            result = integrator(problem, return_N=True)
        except Exception as e:
            print(f'Error during integration with {integrator_name}: {e}')
            print_exc()
            continue
        end_time = time.time()

        estimate = result['estimate']
        if problem.answer != 0:
            error = 100 * (estimate - problem.answer) / problem.answer
            error_name = 'Signed Relative error'
            error_unit = ' %'
        else:
            error = estimate - problem.answer
            error_name = 'Signed Absolute error'
            error_unit = ''

        results[integrator_name] = {
            'estimate': estimate,
            'error': float(error),
            'n_evals': result['n_evals'],
            'time': end_time - start_time,
        }

        if verbose >= 1:
            print(f'-------- {integrator_name} --------')
            print(f'True answer of {str(problem)}: {problem.answer}')
            print(f'Estimated value: {estimate:.6f}')
            print(f'{error_name}: {error:.2e}{error_unit}')
            print(f'Number of evaluations: {result["n_evals"]}')
            print(f'Time taken: {end_time - start_time:.4f} s')
            print(f'----------------------------------')

    if len(results) == 0:
        raise Exception('no run succeeded')

    if verbose >= 1 and len(results) > 1:
        errors = np.abs([summary['error'] for summary in results.values()])
        best = list(results)[int(np.argmin(errors))]
        print(f'Smallest error: {best}')

    return results
