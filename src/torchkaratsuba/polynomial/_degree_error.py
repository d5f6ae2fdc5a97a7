from torchkaratsuba.polynomial._polynomial_error import PolynomialError


class DegreeError(PolynomialError):
    """Raised when an operand length is invalid for the operation.

    Covers zero-length operands and summands of unequal length in
    ``naive_addto_sum_product``.
    """

    pass
