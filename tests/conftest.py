import pytest
import polyQuadrature as pq

TESTING_COEFFICIENTS = [
    [],
    [3.0],
    [1.0, -2.0],
    [0.0, 0.0, 1.0],
    [2, 0, 0, 4],
    [2, 0, 0, 4, 0, 0, 0, 5],
    [-1.5, 0.25, 0.0, -3.0, 0.5],
]

@pytest.fixture(params=TESTING_COEFFICIENTS)
def polynomial(request):
    """polynomials from the zero function up to degree 7"""
    return pq.PolynomialFunction(request.param)


@pytest.fixture
def sparse_polynomial():
    """2 + 4x^3 + 5x^7"""
    return pq.PolynomialFunction([2, 0, 0, 4, 0, 0, 0, 5])


@pytest.fixture(params=['analytical', 'riemann'])
def integrator(request):
    """
    "Meta" fixture to run a test for each integrator
    """
    switch = {
        'analytical': pq.AnalyticalIntegrator,
        'riemann': pq.RiemannIntegrator,
    }
    return switch[request.param]()
