"""Checked-mode configuration for the polynomial kernels.

Kernels skip all argument validation by default. Checked mode validates
operand lengths, output capacity, dtypes and aliasing before any output
coefficient is written, raising a ``PolynomialError`` subclass instead of
producing undefined results.
"""

import contextlib
import logging
import os
from typing import Iterator

logger = logging.getLogger(__name__)

ENVIRONMENT_VARIABLE = "TORCHKARATSUBA_CHECKED"


def _checks_requested() -> bool:
    raw = os.getenv(ENVIRONMENT_VARIABLE, "0").strip().lower()
    return raw in {"1", "true", "yes", "on"}


_CHECKS_ENABLED: bool = _checks_requested()


def checks_enabled() -> bool:
    """Return whether kernels validate their arguments."""
    return _CHECKS_ENABLED


def enable_checks() -> None:
    """Turn on argument validation for every kernel."""
    global _CHECKS_ENABLED

    if not _CHECKS_ENABLED:
        logger.info("polynomial kernel checks enabled")
    _CHECKS_ENABLED = True


def disable_checks() -> None:
    """Turn off argument validation for every kernel."""
    global _CHECKS_ENABLED

    if _CHECKS_ENABLED:
        logger.info("polynomial kernel checks disabled")
    _CHECKS_ENABLED = False


@contextlib.contextmanager
def checks(enabled: bool = True) -> Iterator[None]:
    """Temporarily enable (or disable) argument validation.

    Examples
    --------
    >>> with checks():
    ...     naive_product(p, a, b)  # raises CapacityError if p is too short
    """
    previous = _CHECKS_ENABLED
    if enabled:
        enable_checks()
    else:
        disable_checks()
    try:
        yield
    finally:
        if previous:
            enable_checks()
        else:
            disable_checks()


__all__ = [
    "ENVIRONMENT_VARIABLE",
    "checks",
    "checks_enabled",
    "disable_checks",
    "enable_checks",
]
