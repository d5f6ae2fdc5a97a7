"""Exception hierarchy for polynomial kernels."""

from torchkaratsuba.polynomial._aliasing_error import AliasingError
from torchkaratsuba.polynomial._batch_shape_error import BatchShapeError
from torchkaratsuba.polynomial._capacity_error import CapacityError
from torchkaratsuba.polynomial._degree_error import DegreeError
from torchkaratsuba.polynomial._dtype_error import DTypeError
from torchkaratsuba.polynomial._polynomial_error import PolynomialError

__all__ = [
    "AliasingError",
    "BatchShapeError",
    "CapacityError",
    "DTypeError",
    "DegreeError",
    "PolynomialError",
]
