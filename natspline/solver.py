from warnings import warn
from numpy import ndarray, zeros
from scipy.linalg import solveh_banded


solver_methods = ("thomas", "banded")


def natural_spline_coefficients(
    x: ndarray,
    y: ndarray,
    method: str = "thomas",
    residual_tolerance: float = 1e-8,
    show_warnings: bool = True,
) -> tuple[ndarray, ndarray, ndarray, ndarray]:
    r"""
    Computes the coefficients of a natural cubic spline in 'local power' form, such that
    on the interval between ``x[i]`` and ``x[i + 1]`` the spline is given by

    .. math::

       S_i(t) = a_i + b_i t + c_i t^2 + d_i t^3, \quad \quad t = x - x_i.

    The quadratic coefficients are found by solving a tridiagonal system for the interior
    knots, with the second derivative fixed at zero on both end knots.

    :param x: \
        The knot positions as a strictly increasing 1D ``numpy.ndarray``.

    :param y: \
        The sample values at each knot as a 1D ``numpy.ndarray``.

    :param method: \
        The algorithm used to solve the tridiagonal system. ``"thomas"`` uses a
        forward-elimination / back-substitution pass specialised to the natural spline
        system. ``"banded"`` uses ``scipy.linalg.solveh_banded``.

    :param residual_tolerance: \
        Threshold on the relative residual of the solved system above which a warning
        is issued.

    :param show_warnings: \
        Whether to display a warning if the solution fails the residual check.

    :return: \
        The coefficient arrays ``a, b, c, d``, each with one element per interval.
    """
    assert x.ndim == y.ndim == 1
    assert x.size == y.size
    assert x.size > 2

    n = x.size - 1
    h = x[1:] - x[:-1]
    assert (h > 0).all()

    # right-hand side of the system for the interior knots
    alpha = zeros(n)
    alpha[1:] = (
        3 * (y[2:] * h[:-1] - y[1:-1] * (x[2:] - x[:-2]) + y[:-2] * h[1:])
        / (h[:-1] * h[1:])
    )

    if method == "thomas":
        c = _thomas_pass(x, h, alpha)
    elif method == "banded":
        c = _banded_solve(h, alpha)
    else:
        raise ValueError(
            f"""\n
            [ natural_spline_coefficients error ]
            >> The 'method' argument must be one of {solver_methods},
            >> but was given as '{method}'.
            """
        )

    _check_residual(h, alpha, c, residual_tolerance, show_warnings)

    a = y[:-1].copy()
    b = (y[1:] - y[:-1]) / h - h * (c[1:] + 2 * c[:-1]) / 3
    d = (c[1:] - c[:-1]) / (3 * h)
    return a, b, c[:-1], d


def _thomas_pass(x: ndarray, h: ndarray, alpha: ndarray) -> ndarray:
    n = h.size
    l = zeros(n)
    mu = zeros(n)
    z = zeros(n)

    # the left boundary row pins c[0] to zero
    l[0] = 1.0
    for i in range(1, n):
        l[i] = 2 * (x[i + 1] - x[i - 1]) - h[i - 1] * mu[i - 1]
        mu[i] = h[i] / l[i]
        z[i] = (alpha[i] - h[i - 1] * z[i - 1]) / l[i]

    # c[n] stays at zero for the natural boundary on the right
    c = zeros(n + 1)
    for j in range(n - 1, -1, -1):
        c[j] = z[j] - mu[j] * c[j + 1]
    return c


def _banded_solve(h: ndarray, alpha: ndarray) -> ndarray:
    # the interior system is symmetric positive-definite, so we
    # store only the diagonal and the super-diagonal
    n = h.size
    A = zeros([2, n - 1])
    A[1, :] = 2 * (h[:-1] + h[1:])
    A[0, 1:] = h[1:-1]

    c = zeros(n + 1)
    if n == 2:
        # a single interior knot, for which LAPACK rejects the empty super-diagonal
        c[1] = alpha[1] / A[1, 0]
    else:
        c[1:-1] = solveh_banded(A, alpha[1:])
    return c


def _check_residual(
    h: ndarray, alpha: ndarray, c: ndarray, tolerance: float, show_warnings: bool
) -> float:
    residual = (
        h[:-1] * c[:-2] + 2 * (h[:-1] + h[1:]) * c[1:-1] + h[1:] * c[2:] - alpha[1:]
    )
    scale = abs(alpha[1:]).max()
    if scale == 0.0:
        return 0.0

    relative_residual = abs(residual).max() / scale
    if relative_residual > tolerance and show_warnings:
        warn(
            f"""\n
            [ natural_spline_coefficients warning ]
            >> The solution of the spline system has a relative residual of
            >> {relative_residual:.3e}, which exceeds the tolerance of {tolerance:.1e}.
            >> The spline coefficients may be affected by rounding error.
            """
        )
    return relative_residual
