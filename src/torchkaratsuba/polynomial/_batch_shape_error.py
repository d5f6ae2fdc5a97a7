from torchkaratsuba.polynomial._polynomial_error import PolynomialError


class BatchShapeError(PolynomialError):
    """Batch dimensions of the buffers do not line up.

    Operand batch shapes must broadcast with each other, and the result must
    broadcast into the batch shape of the output buffer.
    """

    pass
