class SplineError(ValueError):
    """
    Base class for the errors raised while building or evaluating a spline.
    """


class DimensionMismatch(SplineError):
    pass


class InsufficientPoints(SplineError):
    pass


class NonFiniteValues(SplineError):
    pass


class NonMonotonicKnots(SplineError):
    pass


class OutOfDomain(SplineError):
    pass
