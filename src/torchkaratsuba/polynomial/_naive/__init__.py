from ._banded_sweep import (
    CoefficientAccessor,
    banded_sweep,
    coefficients,
    summed_coefficients,
)
from ._naive_addto_product import naive_addto_product
from ._naive_addto_sum_product import naive_addto_sum_product
from ._naive_product import naive_product
from ._product_length import product_length
from ._scaled_addto import scaled_addto

__all__ = [
    "CoefficientAccessor",
    "banded_sweep",
    "coefficients",
    "naive_addto_product",
    "naive_addto_sum_product",
    "naive_product",
    "product_length",
    "scaled_addto",
    "summed_coefficients",
]
