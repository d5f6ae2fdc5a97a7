"""Three-region Cauchy product sweep shared by the naive multiply kernels."""

import logging
from typing import Callable

from torch import Tensor

logger = logging.getLogger(__name__)

# Returns the coefficients [start, stop) of an operand along the last axis.
CoefficientAccessor = Callable[[int, int], Tensor]


def coefficients(a: Tensor) -> CoefficientAccessor:
    """Accessor reading a slice of a single coefficient buffer."""

    def accessor(start: int, stop: int) -> Tensor:
        return a[..., start:stop]

    return accessor


def summed_coefficients(a0: Tensor, a1: Tensor) -> CoefficientAccessor:
    """Accessor reading the pointwise sum of two equal-length buffers.

    Only the requested slice of ``a0 + a1`` is formed.
    """

    def accessor(start: int, stop: int) -> Tensor:
        return a0[..., start:stop] + a1[..., start:stop]

    return accessor


def banded_sweep(
    p: Tensor,
    x: CoefficientAccessor,
    x_length: int,
    y: CoefficientAccessor,
    y_length: int,
    *,
    accumulate: bool,
) -> Tensor:
    r"""Write or add the Cauchy product of ``x`` and ``y`` into ``p``.

    For every output index ``n`` in ``[0, x_length + y_length - 1)``

    .. math::

        p_n \mathrel{(+)=} \sum_{i + j = n} x_i y_j

    with ``0 <= i < x_length`` and ``0 <= j < y_length``.

    The valid ``(i, j)`` pairs form a band clipped by both operand lengths.
    Instead of testing bounds per term the output range is split into three
    regions, each with bounds fixed up front:

    1. ``n`` in ``0 .. x_deg``: ``i`` in ``0 .. n`` (growing window).
    2. ``n`` in ``x_deg + 1 .. y_deg``: ``i`` in ``0 .. x_deg`` (full width).
    3. ``n`` in ``y_deg + 1 .. x_deg + y_deg``: ``i`` in
       ``n - y_deg .. x_deg`` (shrinking window).

    Region 2 is empty when the operands have equal length. Within a region
    each output coefficient is a single reduction over an ``x`` slice and a
    reversed ``y`` slice, so no access falls outside either operand.

    Parameters
    ----------
    p : Tensor
        Output buffer, shape ``(..., M)`` with
        ``M >= x_length + y_length - 1``. Modified in place.
    x, y : CoefficientAccessor
        Operand accessors, see :func:`coefficients` and
        :func:`summed_coefficients`.
    x_length, y_length : int
        Operand lengths, both at least 1.
    accumulate : bool
        If False, output coefficients are overwritten; otherwise the
        product is added to the existing contents.

    Returns
    -------
    Tensor
        ``p``.

    Notes
    -----
    The shorter operand drives the band. Operands are swapped when
    ``x_length > y_length``; the product is symmetric so only the loop shape
    changes.

    Reductions run in ``p.dtype``; integer overflow wraps.
    """
    if x_length > y_length:
        logger.debug(
            "swapping operands of lengths %d and %d", x_length, y_length
        )
        x, x_length, y, y_length = y, y_length, x, x_length

    x_degree = x_length - 1
    y_degree = y_length - 1

    def store(n: int, terms: Tensor) -> None:
        total = terms.sum(dim=-1, dtype=p.dtype)
        if accumulate:
            p[..., n] += total
        else:
            p[..., n] = total

    # Region 1: band clipped by i = 0 and i = n.
    for n in range(0, x_degree + 1):
        store(n, x(0, n + 1) * y(0, n + 1).flip(-1))

    # Region 2: every x coefficient contributes.
    if y_degree > x_degree:
        head = x(0, x_length)
        for n in range(x_degree + 1, y_degree + 1):
            store(n, head * y(n - x_degree, n + 1).flip(-1))

    # Region 3: band clipped by j = y_deg.
    for n in range(y_degree + 1, x_degree + y_degree + 1):
        store(
            n,
            x(n - y_degree, x_length) * y(n - x_degree, y_length).flip(-1),
        )

    return p
