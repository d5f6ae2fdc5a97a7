from torchkaratsuba.polynomial._polynomial_error import PolynomialError


class CapacityError(PolynomialError):
    """Raised when an output buffer is too short for the result."""

    pass
