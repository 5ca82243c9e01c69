from numpy import ndarray
from natspline.polynomial import PolynomialFunction


def assemble_segments(
    a: ndarray, b: ndarray, c: ndarray, d: ndarray
) -> tuple[PolynomialFunction, ...]:
    """
    Packs per-interval spline coefficients into one cubic ``PolynomialFunction``
    per interval, with coefficients ordered ``(a[i], b[i], c[i], d[i])``.
    """
    assert a.size == b.size == c.size == d.size
    return tuple(
        PolynomialFunction([a[i], b[i], c[i], d[i]]) for i in range(a.size)
    )
