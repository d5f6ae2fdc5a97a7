"""Benchmark the naive product kernels.

Times the three-region sweep against numpy's direct convolution across
polynomial degrees, for equal and unequal operand lengths.
"""

import time

import numpy
import torch

from torchkaratsuba.polynomial import (
    naive_addto_sum_product,
    naive_product,
    product_length,
)


def benchmark_product(
    a_degree: int,
    b_degree: int,
    n_iterations: int = 20,
    method: str = "sweep",
) -> float:
    """Benchmark one product at the given degrees.

    Parameters
    ----------
    a_degree, b_degree : int
        Degrees of the operands.
    n_iterations : int
        Number of iterations for timing.
    method : str
        'sweep', 'sum_product' or 'numpy'.

    Returns
    -------
    float
        Average time per product in milliseconds.
    """
    a = torch.randint(-100, 100, (a_degree + 1,), dtype=torch.int64)
    a1 = torch.randint(-100, 100, (a_degree + 1,), dtype=torch.int64)
    b = torch.randint(-100, 100, (b_degree + 1,), dtype=torch.int64)
    n_out = product_length(a_degree + 1, b_degree + 1)
    p = torch.zeros(n_out, dtype=torch.int64)

    if method == "sweep":

        def run():
            naive_product(p, a, b)

    elif method == "sum_product":

        def run():
            naive_addto_sum_product(p, a, a1, b)

    elif method == "numpy":
        a_np = a.numpy()
        b_np = b.numpy()

        def run():
            numpy.convolve(a_np, b_np)

    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(3):
        run()

    start = time.perf_counter()
    for _ in range(n_iterations):
        run()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run product benchmarks across degrees."""
    shapes = [
        (8, 8),
        (8, 64),
        (32, 32),
        (32, 256),
        (128, 128),
        (128, 512),
    ]

    print("Naive Product Benchmark")
    print("=" * 70)
    print(
        f"{'Degrees':>12} {'Sweep (ms)':>14} "
        f"{'Sum-prod (ms)':>14} {'NumPy (ms)':>14}"
    )
    print("-" * 70)

    for a_degree, b_degree in shapes:
        timings = []
        for method in ("sweep", "sum_product", "numpy"):
            try:
                timings.append(
                    benchmark_product(a_degree, b_degree, method=method)
                )
            except Exception as e:
                timings.append(float("nan"))
                print(f"{method} failed for {a_degree}x{b_degree}: {e}")

        label = f"{a_degree}x{b_degree}"
        print(f"{label:>12} " + " ".join(f"{t:>14.4f}" for t in timings))

    print()
    print("Notes:")
    print("- Sweep issues one reduction per output coefficient")
    print("- Sum-prod adds A0 + A1 slice by slice inside the sweep")
    print("- NumPy uses its direct convolution as a reference")


if __name__ == "__main__":
    main()
