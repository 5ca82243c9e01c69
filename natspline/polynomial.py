from dataclasses import dataclass
from numpy import arange, array, asarray, ndarray, zeros_like


def horner(coefficients: ndarray, t):
    """
    Evaluates a polynomial using Horner's scheme.

    :param coefficients: \
        The polynomial coefficients in order of increasing degree, such that
        ``coefficients[k]`` multiplies ``t**k``. If a 2D array of shape
        ``(n, k)`` is given, each row is treated as a separate polynomial and
        ``t`` must broadcast against the first axis.

    :param t: \
        The point(s) at which the polynomial is evaluated.

    :return: \
        The value(s) of the polynomial at ``t``.
    """
    result = coefficients[..., -1] + zeros_like(t, dtype=float)
    for k in range(coefficients.shape[-1] - 2, -1, -1):
        result = result * t + coefficients[..., k]
    return result


@dataclass(frozen=True, eq=False)
class PolynomialFunction:
    """
    A single-variable polynomial stored as its coefficients in order of
    increasing degree.

    :param coefficients: \
        The coefficients as a 1D array, where ``coefficients[k]`` multiplies
        ``t**k``. A read-only copy is stored.
    """
    coefficients: ndarray

    def __post_init__(self):
        coeffs = array(self.coefficients, dtype=float)
        assert coeffs.ndim == 1
        assert coeffs.size > 0
        coeffs.flags.writeable = False
        object.__setattr__(self, "coefficients", coeffs)

    @property
    def degree(self) -> int:
        return self.coefficients.size - 1

    def evaluate(self, t):
        return horner(self.coefficients, asarray(t, dtype=float))

    def __call__(self, t):
        return self.evaluate(t)

    def derivative(self):
        """
        Returns the derivative of the polynomial as a new ``PolynomialFunction``.
        The derivative of a constant is the zero polynomial.
        """
        if self.degree == 0:
            return PolynomialFunction(array([0.0]))
        return PolynomialFunction(self.coefficients[1:] * arange(1, self.degree + 1))

    def __repr__(self):
        return f"PolynomialFunction({self.coefficients.tolist()})"
