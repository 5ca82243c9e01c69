from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError
from numpy import exp, log, sin, linspace, array, allclose, cumsum, isclose, int64, float32
from numpy.random import default_rng
from scipy.interpolate import CubicSpline
from natspline import interpolate, OutOfDomain, SplineFunction, PolynomialFunction
from natspline import DimensionMismatch, NonMonotonicKnots
import pytest


rng = default_rng(42)


def sinexp(x):
    return sin(3*x) * exp(-x)


def random_samples(n_points: int):
    x = cumsum(rng.uniform(0.05, 2.0, size=n_points)) - 3.0
    y = rng.normal(scale=5.0, size=n_points)
    return x, y


def test_cubic_spline():
    x_knots = exp(linspace(log(1), log(6), 64))
    x_test = 0.5 * (x_knots[1:] + x_knots[:-1])
    y_knots = sinexp(x_knots)
    y_test = sinexp(x_test)

    spline = interpolate(x_knots, y_knots)
    y_spline = spline(x_test)

    max_error = abs(y_spline - y_test).max()
    assert max_error < 1e-4


def test_worked_example():
    spline = interpolate([0., 1., 2.], [0., 1., 0.])
    assert spline.polynomials[0].coefficients.tolist() == [0.0, 1.5, 0.0, -0.5]
    assert spline.polynomials[1].coefficients.tolist() == [1.0, 0.0, -1.5, 0.5]
    assert spline.evaluate(0.5) == 0.6875
    assert spline.evaluate(1.5) == 0.6875
    assert spline.evaluate(1.0) == 1.0


@pytest.mark.parametrize("n_points", [3, 4, 10, 50])
def test_interpolation_property(n_points):
    x, y = random_samples(n_points)
    spline = interpolate(x, y, include_right_endpoint=True)
    values = array([spline.evaluate(v) for v in x])
    assert allclose(values, y, rtol=1e-12, atol=1e-12)
    # knots other than the last one are reproduced exactly
    assert (values[:-1] == y[:-1]).all()


@pytest.mark.parametrize("n_points", [3, 5, 25])
def test_derivative_continuity(n_points):
    x, y = random_samples(n_points)
    spline = interpolate(x, y)
    h = x[1:] - x[:-1]
    first = [p.derivative() for p in spline.polynomials]
    second = [p.derivative() for p in first]

    for i in range(1, n_points - 1):
        assert isclose(spline.polynomials[i - 1](h[i - 1]), spline.polynomials[i](0.0), atol=1e-9)
        assert isclose(first[i - 1](h[i - 1]), first[i](0.0), atol=1e-9)
        assert isclose(second[i - 1](h[i - 1]), second[i](0.0), atol=1e-9)


@pytest.mark.parametrize("n_points", [3, 5, 25])
def test_natural_boundary(n_points):
    x, y = random_samples(n_points)
    spline = interpolate(x, y)
    second = [p.derivative().derivative() for p in spline.polynomials]
    assert second[0](0.0) == 0.0
    assert isclose(second[-1](x[-1] - x[-2]), 0.0, atol=1e-8)


def test_domain_boundary():
    x, y = [0., 1., 2.], [0., 1., 0.]
    spline = interpolate(x, y)
    assert spline.evaluate(0.0) == 0.0
    assert spline.domain == (0.0, 2.0)

    with pytest.raises(OutOfDomain):
        spline.evaluate(2.0)

    with pytest.raises(OutOfDomain):
        spline.evaluate(-1e-9)

    with pytest.raises(OutOfDomain):
        spline.evaluate(float("nan"))

    with pytest.raises(OutOfDomain):
        spline(array([0.5, 1.0, 2.0]))


def test_include_right_endpoint():
    spline = interpolate([0., 1., 2.], [0., 1., 0.], include_right_endpoint=True)
    assert spline.evaluate(2.0) == 0.0
    assert spline(array([0.5, 2.0])).tolist() == [0.6875, 0.0]

    with pytest.raises(OutOfDomain):
        spline.evaluate(2.0 + 1e-9)

    with pytest.raises(OutOfDomain):
        spline.evaluate(-1e-9)


def test_vectorised_evaluation():
    x, y = random_samples(30)
    spline = interpolate(x, y)
    x_test = rng.uniform(x[0], x[-1], size=(20, 10))
    values = spline(x_test)

    assert values.shape == x_test.shape
    expected = array([[spline.evaluate(v) for v in row] for row in x_test])
    assert allclose(values, expected, rtol=1e-14, atol=1e-14)
    assert isinstance(spline(float(x[3])), float)


def test_agreement_with_scipy():
    x = linspace(1000, 2000, 500)
    y = 0.00001 * x**2 + rng.normal(size=x.size)
    x_test = rng.uniform(1000, 2000, size=5000)

    spline = interpolate(x, y)
    reference = CubicSpline(x, y, bc_type="natural")
    assert allclose(spline(x_test), reference(x_test))
    assert allclose(spline.derivative()(x_test), reference.derivative()(x_test))


def test_linear_data_is_reproduced():
    x = linspace(0, 9, 10)
    spline = interpolate(x, 2 * x + 1)
    x_test = linspace(0, 8.99, 50)
    assert allclose(spline(x_test), 2 * x_test + 1, rtol=1e-14, atol=1e-13)
    assert allclose(spline.derivative()(x_test), 2.0)


def test_derivative():
    spline = interpolate([0., 1., 2.], [0., 1., 0.])
    deriv = spline.derivative()
    assert isinstance(deriv, SplineFunction)
    assert deriv.n_segments == spline.n_segments
    assert (deriv.knots == spline.knots).all()
    assert deriv.polynomials[0].coefficients.tolist() == [1.5, 0.0, -1.5]
    # the slope is zero at the peak of the symmetric spline
    assert deriv.evaluate(1.0) == 0.0


def test_immutability():
    spline = interpolate([0., 1., 2., 3.], [1., 3., 2., 0.])

    with pytest.raises(FrozenInstanceError):
        spline.knots = array([0., 1., 2., 4.])

    with pytest.raises(ValueError):
        spline.knots[0] = -1.0

    with pytest.raises(ValueError):
        spline.coefficients[0, 0] = 5.0

    with pytest.raises(ValueError):
        spline.polynomials[0].coefficients[0] = 5.0


def test_input_arrays_are_copied():
    x = array([0., 1., 2., 3.])
    y = array([1., 3., 2., 0.])
    spline = interpolate(x, y)
    x[0] = -10.0
    y[0] = 100.0
    assert spline.knots[0] == 0.0
    assert spline.evaluate(0.0) == 1.0


def test_concurrent_evaluation():
    x, y = random_samples(40)
    spline = interpolate(x, y)
    x_test = rng.uniform(x[0], x[-1], size=2000)
    expected = [spline.evaluate(v) for v in x_test]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(spline.evaluate, x_test))
    assert results == expected


@pytest.mark.parametrize("x", [int64(1), float32(0.5), array(0.5), 1, 0.5])
def test_scalar_call_returns_float(x):
    spline = interpolate([0., 1., 2.], [0., 1., 0.])
    value = spline(x)
    assert isinstance(value, float)
    assert value == spline.evaluate(float(x))


def test_direct_construction_is_checked():
    polynomials = (PolynomialFunction([0., 1.]), PolynomialFunction([1., -1.]))

    with pytest.raises(NonMonotonicKnots):
        SplineFunction(knots=[0., 2., 1.], polynomials=polynomials)

    with pytest.raises(DimensionMismatch):
        SplineFunction(knots=[0., 1., 2., 3.], polynomials=polynomials)

    with pytest.raises(DimensionMismatch):
        SplineFunction(knots=[[0., 1., 2.]], polynomials=polynomials)

    spline = SplineFunction(knots=[0., 1., 2.], polynomials=polynomials)
    assert spline(array([0.5, 1.5])).tolist() == [0.5, 0.5]
