from numpy import array, diff, isfinite, ndarray
from natspline.exceptions import (
    DimensionMismatch,
    InsufficientPoints,
    NonFiniteValues,
    NonMonotonicKnots,
)


def validate_samples(x, y) -> tuple[ndarray, ndarray]:
    """
    Checks that a set of sample points is suitable for building a natural
    cubic spline, and returns the samples as float64 arrays.

    :param x: \
        The knot positions as a 1D sequence, which must be strictly increasing.

    :param y: \
        The sample values at each knot as a 1D sequence of the same length as ``x``.

    :return: \
        Copies of ``x`` and ``y`` as 1D ``numpy.ndarray`` of type float64.
    """
    x = array(x, dtype=float)
    y = array(y, dtype=float)

    if x.ndim != 1 or y.ndim != 1:
        raise DimensionMismatch(
            f"""\n
            [ interpolate error ]
            >> The 'x' and 'y' arguments must be one-dimensional, but
            >> have {x.ndim} and {y.ndim} dimensions respectively.
            """
        )

    if x.size != y.size:
        raise DimensionMismatch(
            f"""\n
            [ interpolate error ]
            >> The 'x' and 'y' arguments must have the same length, but
            >> have lengths {x.size} and {y.size} respectively.
            """
        )

    if x.size < 3:
        raise InsufficientPoints(
            f"""\n
            [ interpolate error ]
            >> At least 3 sample points are required to build the spline,
            >> but only {x.size} were given.
            """
        )

    if not (isfinite(x).all() and isfinite(y).all()):
        raise NonFiniteValues(
            """\n
            [ interpolate error ]
            >> All values given in the 'x' and 'y' arguments must be finite.
            """
        )

    # adjacent pairs are sufficient to guarantee strict ordering
    bad_pairs = (diff(x) <= 0.0).nonzero()[0]
    if bad_pairs.size > 0:
        i = bad_pairs[0]
        raise NonMonotonicKnots(
            f"""\n
            [ interpolate error ]
            >> The values of 'x' must be strictly increasing, but
            >> x[{i}] = {x[i]} is not less than x[{i + 1}] = {x[i + 1]}.
            """
        )

    return x, y
