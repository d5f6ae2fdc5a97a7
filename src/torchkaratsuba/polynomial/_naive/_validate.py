"""Argument validation used by the kernels in checked mode."""

import logging
from typing import NoReturn, Tuple, Type

import torch
from torch import Tensor

from torchkaratsuba.polynomial._aliasing_error import AliasingError
from torchkaratsuba.polynomial._batch_shape_error import BatchShapeError
from torchkaratsuba.polynomial._capacity_error import CapacityError
from torchkaratsuba.polynomial._degree_error import DegreeError
from torchkaratsuba.polynomial._dtype_error import DTypeError
from torchkaratsuba.polynomial._polynomial_error import PolynomialError

from ._product_length import product_length

logger = logging.getLogger(__name__)

SIGNED_INTEGER_DTYPES = (torch.int8, torch.int16, torch.int32, torch.int64)


def _fail(error: Type[PolynomialError], message: str) -> NoReturn:
    logger.debug("kernel argument check failed: %s", message)
    raise error(message)


def _length(tensor: Tensor) -> int:
    return tensor.shape[-1] if tensor.dim() > 0 else 0


def _memory_span(tensor: Tensor) -> Tuple[int, int]:
    # Byte range [start, stop) covering every element of a strided view.
    last = sum(
        (size - 1) * stride
        for size, stride in zip(tensor.shape, tensor.stride())
    )
    start = tensor.data_ptr()
    return start, start + (last + 1) * tensor.element_size()


def check_dtypes(p: Tensor, **operands: Tensor) -> None:
    if p.dtype not in SIGNED_INTEGER_DTYPES:
        _fail(
            DTypeError,
            f"output must have a signed integer dtype, got {p.dtype}",
        )
    for name, operand in operands.items():
        if operand.dtype != p.dtype:
            _fail(
                DTypeError,
                f"{name} has dtype {operand.dtype}, expected {p.dtype}",
            )


def check_lengths(minimum: int = 1, **operands: Tensor) -> None:
    for name, operand in operands.items():
        if operand.dim() == 0:
            _fail(
                DegreeError,
                f"{name} must have a coefficient axis, got a 0-d tensor",
            )
        if _length(operand) < minimum:
            _fail(
                DegreeError,
                f"{name} must have at least {minimum} coefficient(s), "
                f"got {_length(operand)}",
            )


def check_capacity(p: Tensor, required: int) -> None:
    if _length(p) < required:
        _fail(
            CapacityError,
            f"output holds {_length(p)} coefficient(s), "
            f"{required} required",
        )


def check_batch_shapes(p: Tensor, **operands: Tensor) -> None:
    """Require operand batch shapes to broadcast into the output's."""
    shapes = {
        name: tuple(operand.shape[:-1]) for name, operand in operands.items()
    }
    try:
        batch_shape = torch.broadcast_shapes(*shapes.values())
    except RuntimeError:
        _fail(
            BatchShapeError,
            "operand batch shapes do not broadcast: "
            + ", ".join(f"{k}={v}" for k, v in shapes.items()),
        )

    p_batch_shape = tuple(p.shape[:-1])
    try:
        fits = (
            torch.broadcast_shapes(batch_shape, p_batch_shape) == p_batch_shape
        )
    except RuntimeError:
        fits = False
    if not fits:
        _fail(
            BatchShapeError,
            f"operand batch shape {tuple(batch_shape)} does not broadcast "
            f"into output batch shape {p_batch_shape}",
        )


def check_no_overlap(p: Tensor, **operands: Tensor) -> None:
    """Reject inputs whose memory intersects the output's.

    Views with interleaved strides are treated as overlapping whenever
    their byte ranges intersect.
    """
    if p.numel() == 0:
        return
    p_start, p_stop = _memory_span(p)
    for name, operand in operands.items():
        if operand.numel() == 0 or operand.device != p.device:
            continue
        start, stop = _memory_span(operand)
        if start < p_stop and p_start < stop:
            _fail(AliasingError, f"output overlaps {name}")


def validate_product(p: Tensor, b: Tensor, **a: Tensor) -> None:
    """Validate the arguments of a multiply kernel.

    ``a`` holds one operand (plain products) or two equal-length summands
    (sum-products); ``b`` is the other factor.
    """
    operands = dict(a, b=b)
    check_lengths(**operands)

    a_lengths = {_length(operand) for operand in a.values()}
    if len(a_lengths) != 1:
        _fail(
            DegreeError,
            "summands must have equal length, got "
            + ", ".join(f"{k}={_length(v)}" for k, v in a.items()),
        )

    check_capacity(p, product_length(a_lengths.pop(), _length(b)))
    check_batch_shapes(p, **operands)
    check_dtypes(p, **operands)
    check_no_overlap(p, **operands)


def validate_scaled_addto(p: Tensor, a: Tensor) -> None:
    """Validate the arguments of ``scaled_addto``.

    ``p`` and ``a`` may be the same buffer since the update is elementwise.
    """
    check_lengths(minimum=0, a=a)
    check_capacity(p, _length(a))
    check_batch_shapes(p, a=a)
    check_dtypes(p, a=a)
