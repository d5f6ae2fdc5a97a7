from torch import Tensor

from torchkaratsuba._checks import checks_enabled

from ._banded_sweep import banded_sweep, coefficients, summed_coefficients
from ._validate import validate_product


def naive_addto_sum_product(
    p: Tensor,
    a0: Tensor,
    a1: Tensor,
    b: Tensor,
) -> Tensor:
    """Accumulate the product of a sum with a polynomial, P += (A0 + A1) * B.

    This is the merge step of Karatsuba multiplication, where the middle
    term needs ``(A0 + A1) * (B0 + B1)``. The sum ``A0 + A1`` is formed one
    window at a time as the product is swept; it is never written to a
    buffer of its own.

    Parameters
    ----------
    p : Tensor
        Output buffer, shape ``(..., M)`` with
        ``M >= a0.shape[-1] + b.shape[-1] - 1``. Modified in place.
    a0, a1 : Tensor
        Summands, equal lengths, at least one coefficient each.
    b : Tensor
        Second factor, at least one coefficient.

    Returns
    -------
    Tensor
        ``p``.

    Examples
    --------
    (3 + x)(1 + x^2) = 3 + x + 3x^2 + x^3:

    >>> p = torch.zeros(4, dtype=torch.int64)
    >>> naive_addto_sum_product(
    ...     p,
    ...     torch.tensor([1, 1]),
    ...     torch.tensor([2, 0]),
    ...     torch.tensor([1, 0, 1]),
    ... )
    tensor([3, 1, 3, 1])
    """
    if checks_enabled():
        validate_product(p, b, a0=a0, a1=a1)

    a_length = a0.shape[-1]
    b_length = b.shape[-1]

    return banded_sweep(
        p,
        summed_coefficients(a0, a1),
        a_length,
        coefficients(b),
        b_length,
        accumulate=True,
    )
