"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of numeral system
conversion that are independent of any particular conversion strategy.
"""
