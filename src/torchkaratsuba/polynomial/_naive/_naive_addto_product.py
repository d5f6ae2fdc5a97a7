from torch import Tensor

from torchkaratsuba._checks import checks_enabled

from ._banded_sweep import banded_sweep, coefficients
from ._validate import validate_product


def naive_addto_product(p: Tensor, a: Tensor, b: Tensor) -> Tensor:
    """Accumulate a product into an output buffer, P += A * B.

    Parameters
    ----------
    p : Tensor
        Output buffer, shape ``(..., M)`` with
        ``M >= a.shape[-1] + b.shape[-1] - 1``. Modified in place.
    a, b : Tensor
        Coefficient buffers, at least one coefficient each.

    Returns
    -------
    Tensor
        ``p``.

    See Also
    --------
    naive_product : Overwriting variant.
    """
    if checks_enabled():
        validate_product(p, b, a=a)

    a_length = a.shape[-1]
    b_length = b.shape[-1]

    return banded_sweep(
        p,
        coefficients(a),
        a_length,
        coefficients(b),
        b_length,
        accumulate=True,
    )
