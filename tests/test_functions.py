import pytest

import polyQuadrature as pq
import numpy as np


def reference_sum(coefficients, x):
    total = 0.0
    for i, c in enumerate(coefficients):
        total += c * x ** i
    return total


@pytest.mark.parametrize("x", [-2.0, -0.5, 0.0, 0.3, 1.0, 1.5, 3.0])
def test_evaluate_matches_reference(polynomial, x):
    expected = reference_sum(polynomial.coefficients.tolist(), x)
    assert polynomial.evaluate(x) == pytest.approx(expected, rel=1e-12, abs=1e-12)
    assert isinstance(polynomial.evaluate(x), float)


def test_evaluate_at_zero_gives_constant_term():
    f = pq.PolynomialFunction([7.0, 3.0, 2.0])
    assert f.evaluate(0.0) == 7.0
    assert not np.isnan(f.evaluate(0))


def test_empty_polynomial_is_zero():
    f = pq.PolynomialFunction([])
    assert f.evaluate(2.5) == 0.0
    assert f.degree == -1
    assert f.describe() == ""


def test_evaluate_array(polynomial):
    xs = np.linspace(-1.0, 2.0, 7)
    ys = polynomial.evaluate(xs)
    assert isinstance(ys, np.ndarray)
    assert ys.shape == xs.shape
    for x, y in zip(xs, ys):
        assert y == pytest.approx(polynomial.evaluate(float(x)))


def test_call_is_evaluate(sparse_polynomial):
    assert sparse_polynomial(1.2) == sparse_polynomial.evaluate(1.2)


@pytest.mark.parametrize("coefficients, expected", [
    ([], [0.0]),
    ([3.0], [0.0, 3.0]),
    ([2, 0, 0, 4, 0, 0, 0, 5], [0, 2, 0, 0, 1, 0, 0, 0, 0.625]),
    ([1.0, 2.0, 3.0], [0.0, 1.0, 1.0, 1.0]),
])
def test_antiderivative_coefficients(coefficients, expected):
    F = pq.PolynomialFunction(coefficients).antiderivative()
    assert isinstance(F, pq.PolynomialFunction)
    assert F.coefficients.tolist() == pytest.approx(expected)


def test_antiderivative_raises_degree(polynomial):
    F = polynomial.antiderivative()
    assert F.coefficients.size == polynomial.coefficients.size + 1
    assert F.coefficients[0] == 0.0
    assert F.degree == polynomial.degree + 1


def test_antiderivative_is_independent(sparse_polynomial):
    F = sparse_polynomial.antiderivative()
    assert F is not sparse_polynomial
    assert sparse_polynomial.coefficients.tolist() == [2, 0, 0, 4, 0, 0, 0, 5]


def test_coefficients_are_read_only(sparse_polynomial):
    with pytest.raises(ValueError):
        sparse_polynomial.coefficients[0] = 10.0


def test_input_list_is_copied():
    coefficients = [1.0, 2.0]
    f = pq.PolynomialFunction(coefficients)
    coefficients[0] = 100.0
    assert f.evaluate(0.0) == 1.0


@pytest.mark.parametrize("coefficients, expected", [
    ([2, 0, 0, 4], "2 + 0x^1 + 0x^2 + 4x^3"),
    ([5], "5"),
    ([1, 0, -3], "1 + 0x^1 + -3x^2"),
    ([2, 0, 0, 4, 0, 0, 0, 5],
     "2 + 0x^1 + 0x^2 + 4x^3 + 0x^4 + 0x^5 + 0x^6 + 5x^7"),
    ([0, 2, 0, 0, 1, 0, 0, 0, 0.625],
     "0 + 2x^1 + 0x^2 + 0x^3 + 1x^4 + 0x^5 + 0x^6 + 0x^7 + 0.625x^8"),
])
def test_describe(coefficients, expected):
    f = pq.PolynomialFunction(coefficients)
    assert f.describe() == expected
    assert str(f) == expected


def test_equality():
    assert pq.PolynomialFunction([1, 2]) == pq.PolynomialFunction([1.0, 2.0])
    assert pq.PolynomialFunction([1, 2]) != pq.PolynomialFunction([1, 2, 0])
    assert len({pq.PolynomialFunction([1, 2]), pq.PolynomialFunction([1, 2])}) == 1


@pytest.mark.parametrize("coefficients, error", [
    ("123", TypeError),
    (3.0, TypeError),
    ([[1.0, 2.0], [3.0, 4.0]], ValueError),
])
def test_invalid_coefficients(coefficients, error):
    with pytest.raises(error):
        pq.PolynomialFunction(coefficients)


def test_function_is_abstract():
    with pytest.raises(TypeError):
        pq.Function()


def test_describe_float_format():
    f = pq.PolynomialFunction([1234567, 0.5])
    assert f.describe() == "1.23457e+06 + 0.5x^1"
    assert f.describe(float_format='{:.1f}') == "1234567.0 + 0.5x^1"


def test_evaluate_long_grid_keeps_shape():
    f = pq.PolynomialFunction([2, 0, 0, 4, 0, 0, 0, 5])
    xs = np.linspace(0.0, 2.0, 200_001)
    ys = f.evaluate(xs)
    assert ys.shape == xs.shape
    assert ys[0] == 2.0
    assert ys[-1] == pytest.approx(2 + 4 * 2.0 ** 3 + 5 * 2.0 ** 7)


def test_empty_polynomial_evaluates_arrays_to_zero():
    ys = pq.PolynomialFunction([]).evaluate(np.array([0.0, 1.0, -3.0]))
    assert ys.tolist() == [0.0, 0.0, 0.0]
