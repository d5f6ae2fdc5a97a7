"""Hypothesis strategies for polynomial kernel testing."""

from ._coefficient_tensors import coefficient_tensors
from ._integer_dtypes import integer_dtypes
from ._product_operands import product_operands

__all__ = [
    "coefficient_tensors",
    "integer_dtypes",
    "product_operands",
]
