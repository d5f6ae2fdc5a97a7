class PolynomialError(Exception):
    """Base class for polynomial kernel errors."""

    pass
