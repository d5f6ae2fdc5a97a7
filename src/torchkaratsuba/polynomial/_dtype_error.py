from torchkaratsuba.polynomial._polynomial_error import PolynomialError


class DTypeError(PolynomialError, TypeError):
    """Coefficient buffers with an unsupported or mismatched dtype.

    Kernels operate on signed integer tensors sharing a single dtype, so
    that overflow wraps the same way for every partial sum.
    """

    pass
