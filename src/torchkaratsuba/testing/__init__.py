"""Testing utilities for torchkaratsuba kernels."""

from . import strategies

__all__ = ["strategies"]
