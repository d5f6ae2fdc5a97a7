from torchkaratsuba.polynomial._polynomial_error import PolynomialError


class AliasingError(PolynomialError):
    """Output buffer overlaps an input buffer.

    Products read inputs after earlier output coefficients have been
    written, so an overlapping output would corrupt later terms.
    """

    pass
