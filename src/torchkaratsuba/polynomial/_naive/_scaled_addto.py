from typing import Union

from torch import Tensor

from torchkaratsuba._checks import checks_enabled

from ._validate import validate_scaled_addto


def scaled_addto(p: Tensor, a: Tensor, scalar: Union[int, Tensor]) -> Tensor:
    """Add a scalar multiple of a polynomial to a buffer, P += c * A.

    Parameters
    ----------
    p : Tensor
        Output buffer, shape ``(..., M)`` with ``M >= a.shape[-1]``. Only the
        first ``a.shape[-1]`` coefficients are updated.
    a : Tensor
        Coefficient buffer. May be ``p`` itself, or empty (no-op).
    scalar : int or Tensor
        Scalar multiple, representable in ``p.dtype``.

    Returns
    -------
    Tensor
        ``p``.

    Examples
    --------
    >>> p = torch.tensor([1, 1, 1])
    >>> scaled_addto(p, torch.tensor([1, 2]), -3)
    tensor([-2, -5,  1])
    """
    if checks_enabled():
        validate_scaled_addto(p, a)

    length = a.shape[-1]
    if length == 0:
        return p

    p[..., :length] += scalar * a
    return p
