from torch import Tensor

from torchkaratsuba._checks import checks_enabled

from ._banded_sweep import banded_sweep, coefficients
from ._validate import validate_product


def naive_product(p: Tensor, a: Tensor, b: Tensor) -> Tensor:
    """Multiply two polynomials into an output buffer, P = A * B.

    Computes the Cauchy product of the coefficient buffers directly in
    O(len(a) * len(b)) operations. This is the base case of Karatsuba
    multiplication.

    Parameters
    ----------
    p : Tensor
        Output buffer, shape ``(..., M)`` with
        ``M >= a.shape[-1] + b.shape[-1] - 1``. The first
        ``a.shape[-1] + b.shape[-1] - 1`` coefficients are overwritten; the
        rest are left untouched.
    a, b : Tensor
        Coefficient buffers in ascending order, shape ``(..., N)``, at least
        one coefficient each. Batch dimensions broadcast against ``p``.

    Returns
    -------
    Tensor
        ``p``.

    Notes
    -----
    Arguments are validated only in checked mode (see
    :func:`torchkaratsuba.checks`). Passing ``a`` shorter than ``b`` gives
    the intended loop shape; the result does not depend on the order.

    Examples
    --------
    >>> p = torch.empty(4, dtype=torch.int64)
    >>> naive_product(p, torch.tensor([1, 2]), torch.tensor([3, 4, 5]))
    tensor([ 3, 10, 13, 10])
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
        accumulate=False,
    )
