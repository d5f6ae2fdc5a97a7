from typing import Tuple

import hypothesis.strategies
import torch

from ._coefficient_tensors import coefficient_tensors


@hypothesis.strategies.composite
def product_operands(
    draw: hypothesis.strategies.DrawFn,
    dtype: torch.dtype = torch.int64,
    min_batch_dims: int = 0,
    max_batch_dims: int = 2,
    max_batch_side: int = 4,
    max_length: int = 12,
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Generate two factors sharing one batch shape.

    The coefficient lengths are drawn independently, so every band region of
    the product (growing, full width, shrinking) gets exercised.
    """
    batch_shape = tuple(
        draw(
            hypothesis.strategies.lists(
                hypothesis.strategies.integers(
                    min_value=1, max_value=max_batch_side
                ),
                min_size=min_batch_dims,
                max_size=max_batch_dims,
            )
        )
    )
    a = draw(
        coefficient_tensors(
            dtype=dtype, max_length=max_length, batch_shape=batch_shape
        )
    )
    b = draw(
        coefficient_tensors(
            dtype=dtype, max_length=max_length, batch_shape=batch_shape
        )
    )
    return a, b
