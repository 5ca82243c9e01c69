from natspline.assembly import assemble_segments
from natspline.solver import natural_spline_coefficients, solver_methods
from natspline.spline import SplineFunction
from natspline.validation import validate_samples


class SplineInterpolator:
    """
    Builds natural cubic spline interpolants, which have zero second derivative
    at the first and last knots.

    :param method: \
        The algorithm used to solve for the spline coefficients, either ``"thomas"``
        or ``"banded"``. See ``natural_spline_coefficients`` for details.

    :param include_right_endpoint: \
        Whether the splines produced accept evaluation at their final knot.

    :param show_warnings: \
        Whether to display warnings if the solution of the spline system fails
        its residual check.
    """
    def __init__(
        self,
        method: str = "thomas",
        include_right_endpoint: bool = False,
        show_warnings: bool = True,
    ):
        if method not in solver_methods:
            raise ValueError(
                f"""\n
                [ SplineInterpolator error ]
                >> The 'method' argument must be one of {solver_methods},
                >> but was given as '{method}'.
                """
            )
        self.method = method
        self.include_right_endpoint = include_right_endpoint
        self.show_warnings = show_warnings

    def interpolate(self, x, y) -> SplineFunction:
        """
        Computes the natural cubic spline which passes through the given points.

        :param x: \
            The knot positions as a strictly increasing 1D sequence of at least 3 values.

        :param y: \
            The values of the interpolated function at each knot.

        :return: \
            The spline as a ``SplineFunction``.
        """
        x, y = validate_samples(x, y)
        a, b, c, d = natural_spline_coefficients(
            x, y, method=self.method, show_warnings=self.show_warnings
        )
        return SplineFunction(
            knots=x,
            polynomials=assemble_segments(a, b, c, d),
            include_right_endpoint=self.include_right_endpoint,
        )

    def get_configuration(self) -> dict:
        return {
            "method": self.method,
            "include_right_endpoint": self.include_right_endpoint,
            "show_warnings": self.show_warnings,
        }

    @classmethod
    def from_configuration(cls, config: dict):
        return cls(
            method=config["method"],
            include_right_endpoint=config["include_right_endpoint"],
            show_warnings=config["show_warnings"],
        )

    def copy(self):
        """
        Build and return a separate copy of the interpolator with
        the same configuration.
        """
        return self.from_configuration(self.get_configuration())


def interpolate(x, y, **options) -> SplineFunction:
    """
    Computes the natural cubic spline which passes through the points ``(x[i], y[i])``.

    :param x: \
        The knot positions as a strictly increasing 1D sequence of at least 3 values.

    :param y: \
        The values of the interpolated function at each knot.

    :param options: \
        Keyword arguments passed to ``SplineInterpolator``.

    :return: \
        The spline as a ``SplineFunction``.
    """
    return SplineInterpolator(**options).interpolate(x, y)
