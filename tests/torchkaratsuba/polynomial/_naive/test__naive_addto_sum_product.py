# tests/torchkaratsuba/polynomial/_naive/test__naive_addto_sum_product.py
import pytest
import torch

from torchkaratsuba.polynomial import (
    naive_addto_product,
    naive_addto_sum_product,
)


class TestNaiveAddtoSumProduct:
    """Tests for the fused sum-product accumulate kernel."""

    def test_sum_product_simple(self):
        """(3 + x)(1 + x^2) = 3 + x + 3x^2 + x^3."""
        p = torch.zeros(4, dtype=torch.int64)
        naive_addto_sum_product(
            p,
            torch.tensor([1, 1]),
            torch.tensor([2, 0]),
            torch.tensor([1, 0, 1]),
        )
        torch.testing.assert_close(p, torch.tensor([3, 1, 3, 1]))

    def test_accumulates_in_every_region(self):
        """Existing contents survive at every output index."""
        # a_len = 2, b_len = 4: one index in each of the three regions
        # beyond the first.
        p = torch.tensor([100, 100, 100, 100, 100])
        naive_addto_sum_product(
            p,
            torch.tensor([1, 0]),
            torch.tensor([0, 1]),
            torch.tensor([1, 1, 1, 1]),
        )
        # (1 + x)(1 + x + x^2 + x^3) = 1 + 2x + 2x^2 + 2x^3 + x^4
        torch.testing.assert_close(
            p, torch.tensor([101, 102, 102, 102, 101])
        )

    @pytest.mark.parametrize(
        "a_length,b_length", [(1, 1), (1, 4), (3, 3), (2, 5), (5, 2)]
    )
    def test_decomposes_into_two_products(self, a_length, b_length):
        """P += (A0 + A1) B equals P += A0 B then P += A1 B."""
        generator = torch.Generator().manual_seed(7 * a_length + b_length)
        a0 = torch.randint(-20, 20, (a_length,), generator=generator)
        a1 = torch.randint(-20, 20, (a_length,), generator=generator)
        b = torch.randint(-20, 20, (b_length,), generator=generator)
        initial = torch.randint(
            -20, 20, (a_length + b_length - 1,), generator=generator
        )

        fused = naive_addto_sum_product(initial.clone(), a0, a1, b)

        separate = initial.clone()
        naive_addto_product(separate, a0, b)
        naive_addto_product(separate, a1, b)

        torch.testing.assert_close(fused, separate)

    def test_summands_cancel(self):
        """A1 = -A0 leaves the output unchanged."""
        a0 = torch.tensor([3, -2, 5])
        p = torch.tensor([1, 2, 3, 4, 5])
        naive_addto_sum_product(p, a0, -a0, torch.tensor([9, 9, 9]))
        torch.testing.assert_close(p, torch.tensor([1, 2, 3, 4, 5]))

    def test_longer_summands(self):
        """Summands longer than B give the same result as shorter ones."""
        p = torch.zeros(4, dtype=torch.int64)
        naive_addto_sum_product(
            p,
            torch.tensor([1, 0, 1]),
            torch.tensor([0, 0, 0]),
            torch.tensor([3, 1]),
        )
        torch.testing.assert_close(p, torch.tensor([3, 1, 3, 1]))

    def test_inputs_unchanged(self):
        """Summands and B are only read."""
        a0 = torch.tensor([1, 2])
        a1 = torch.tensor([3, 4])
        b = torch.tensor([5, 6, 7])
        naive_addto_sum_product(torch.zeros(4, dtype=torch.int64), a0, a1, b)
        torch.testing.assert_close(a0, torch.tensor([1, 2]))
        torch.testing.assert_close(a1, torch.tensor([3, 4]))
        torch.testing.assert_close(b, torch.tensor([5, 6, 7]))

    def test_batched(self):
        """Batched summands broadcast against a single B."""
        p = torch.zeros(2, 3, dtype=torch.int64)
        a0 = torch.tensor([[1, 0], [0, 1]])
        a1 = torch.tensor([[0, 1], [1, 0]])
        b = torch.tensor([1, -1])
        naive_addto_sum_product(p, a0, a1, b)
        # both rows: (1 + x)(1 - x) = 1 - x^2
        expected = torch.tensor([[1, 0, -1], [1, 0, -1]])
        torch.testing.assert_close(p, expected)

    def test_sum_wraps(self):
        """The pointwise sum wraps in the coefficient dtype."""
        p = torch.zeros(1, dtype=torch.int8)
        naive_addto_sum_product(
            p,
            torch.tensor([100], dtype=torch.int8),
            torch.tensor([100], dtype=torch.int8),
            torch.tensor([1], dtype=torch.int8),
        )
        torch.testing.assert_close(p, torch.tensor([-56], dtype=torch.int8))
