from dataclasses import dataclass, field
from numpy import array, atleast_1d, minimum, ndarray, searchsorted, zeros
from natspline.exceptions import DimensionMismatch, NonMonotonicKnots, OutOfDomain
from natspline.polynomial import PolynomialFunction, horner


@dataclass(frozen=True, eq=False)
class SplineFunction:
    """
    A piecewise polynomial function defined over a set of strictly increasing
    knots. On the interval between ``knots[i]`` and ``knots[i + 1]`` the function
    is given by ``polynomials[i]`` evaluated at ``x - knots[i]``.

    Instances are immutable, and so may be evaluated from multiple threads.

    :param knots: \
        The knot positions as a strictly increasing 1D array. A read-only
        copy is stored.

    :param polynomials: \
        The polynomial for each interval, one fewer than the number of knots.

    :param include_right_endpoint: \
        By default the domain of the function is the half-open interval
        ``[knots[0], knots[-1])``. If ``True``, the final knot is also accepted
        and is evaluated using the last polynomial.
    """
    knots: ndarray
    polynomials: tuple[PolynomialFunction, ...]
    include_right_endpoint: bool = False
    coefficients: ndarray = field(init=False, repr=False)

    def __post_init__(self):
        knots = array(self.knots, dtype=float)
        polynomials = tuple(self.polynomials)
        if knots.ndim != 1 or knots.size < 2:
            raise DimensionMismatch(
                f"""\n
                [ SplineFunction error ]
                >> The 'knots' argument must be a one-dimensional array of at
                >> least 2 values, but has shape {knots.shape}.
                """
            )

        if len(polynomials) != knots.size - 1:
            raise DimensionMismatch(
                f"""\n
                [ SplineFunction error ]
                >> One polynomial is required for each interval between knots,
                >> so {knots.size - 1} were expected but {len(polynomials)} were given.
                """
            )

        if not (knots[1:] > knots[:-1]).all():
            raise NonMonotonicKnots(
                """\n
                [ SplineFunction error ]
                >> The values of 'knots' must be strictly increasing.
                """
            )

        # pad all polynomials to a common degree so they can be evaluated together
        width = max(p.coefficients.size for p in polynomials)
        coefficients = zeros([len(polynomials), width])
        for i, p in enumerate(polynomials):
            coefficients[i, : p.coefficients.size] = p.coefficients

        knots.flags.writeable = False
        coefficients.flags.writeable = False
        object.__setattr__(self, "knots", knots)
        object.__setattr__(self, "polynomials", polynomials)
        object.__setattr__(self, "coefficients", coefficients)

    @property
    def n_segments(self) -> int:
        return len(self.polynomials)

    @property
    def domain(self) -> tuple[float, float]:
        return float(self.knots[0]), float(self.knots[-1])

    def evaluate(self, x: float) -> float:
        """
        Evaluates the spline at a single point.

        :param x: \
            The point at which the spline is evaluated.

        :return: \
            The value of the spline at ``x`` as a float.
        """
        x = float(x)
        if not self._in_domain(x):
            raise OutOfDomain(self._domain_message(f"The value {x} is"))

        i = self._segment_index(x)
        return float(self.polynomials[i](x - self.knots[i]))

    def __call__(self, x):
        """
        Evaluates the spline at one or more points.

        :param x: \
            The points at which the spline is evaluated, as a float or an array.

        :return: \
            The values of the spline as a ``numpy.ndarray`` with the same shape as ``x``,
            or as a float if ``x`` is a scalar.
        """
        x = array(x, dtype=float)
        if x.ndim == 0:
            return self.evaluate(x)

        flat = atleast_1d(x).flatten()
        outside = ~self._in_domain(flat)
        if outside.any():
            raise OutOfDomain(
                self._domain_message(f"{outside.sum()} of the {flat.size} given points are")
            )

        inds = self._segment_index(flat)
        values = horner(self.coefficients[inds, :], flat - self.knots[inds])
        return values.reshape(x.shape)

    def derivative(self):
        """
        Returns the derivative of the spline as a new ``SplineFunction`` defined
        over the same knots.
        """
        return SplineFunction(
            knots=self.knots,
            polynomials=tuple(p.derivative() for p in self.polynomials),
            include_right_endpoint=self.include_right_endpoint,
        )

    def _in_domain(self, x):
        if self.include_right_endpoint:
            return (x >= self.knots[0]) & (x <= self.knots[-1])
        return (x >= self.knots[0]) & (x < self.knots[-1])

    def _segment_index(self, x):
        # the right endpoint, where accepted, belongs to the last segment
        return minimum(searchsorted(self.knots, x, side="right") - 1, self.n_segments - 1)

    def _domain_message(self, subject: str) -> str:
        upper = "]" if self.include_right_endpoint else ")"
        return f"""\n
            [ SplineFunction error ]
            >> {subject} outside the domain of the spline,
            >> which is [{self.knots[0]}, {self.knots[-1]}{upper}.
            """
