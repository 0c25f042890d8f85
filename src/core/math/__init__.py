"""
Core math modules

Точная целочисленная арифметика оснований и чистый движок произвольной точности.
"""

# Radix relations
from src.core.math.radix import (
    exact_log,
    find_common_root,
    integer_nth_root,
    radix_roots,
    round_fraction_digits,
)

# Integer backends
from src.core.math.integer_backends import (
    DEFAULT_BACKENDS,
    DecimalStringBackend,
    IntegerBackend,
    NativeIntegerBackend,
    available_backends,
)

__all__ = [
    # Radix — Roots
    "integer_nth_root",
    "radix_roots",
    "find_common_root",
    "exact_log",
    # Radix — Fractions
    "round_fraction_digits",
    # Integer backends — Types
    "IntegerBackend",
    "NativeIntegerBackend",
    "DecimalStringBackend",
    # Integer backends — Selection
    "DEFAULT_BACKENDS",
    "available_backends",
]
