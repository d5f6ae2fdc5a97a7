"""torchkaratsuba: PyTorch kernels for Karatsuba polynomial multiplication."""

from . import polynomial
from ._checks import checks, checks_enabled, disable_checks, enable_checks

__all__ = [
    "checks",
    "checks_enabled",
    "disable_checks",
    "enable_checks",
    "polynomial",
]

__version__ = "0.1.0"
