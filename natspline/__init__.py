from natspline.exceptions import SplineError, DimensionMismatch, InsufficientPoints
from natspline.exceptions import NonFiniteValues, NonMonotonicKnots, OutOfDomain
from natspline.polynomial import PolynomialFunction
from natspline.spline import SplineFunction
from natspline.interpolator import SplineInterpolator, interpolate

__all__ = [
    "interpolate",
    "SplineInterpolator",
    "SplineFunction",
    "PolynomialFunction",
    "SplineError",
    "DimensionMismatch",
    "InsufficientPoints",
    "NonFiniteValues",
    "NonMonotonicKnots",
    "OutOfDomain",
]
