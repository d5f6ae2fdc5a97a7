"""Naive polynomial arithmetic kernels over caller-owned coefficient buffers.

Polynomials are dense coefficient tensors of shape ``(..., N)`` in ascending
order: ``a[..., i]`` is the coefficient of ``x**i``. Every kernel writes into
an output tensor supplied by the caller and returns it.
"""

from ._exceptions import (
    AliasingError,
    BatchShapeError,
    CapacityError,
    DegreeError,
    DTypeError,
    PolynomialError,
)
from ._naive import (
    naive_addto_product,
    naive_addto_sum_product,
    naive_product,
    product_length,
    scaled_addto,
)

__all__ = [
    "AliasingError",
    "BatchShapeError",
    "CapacityError",
    "DTypeError",
    "DegreeError",
    "PolynomialError",
    "naive_addto_product",
    "naive_addto_sum_product",
    "naive_product",
    "product_length",
    "scaled_addto",
]
