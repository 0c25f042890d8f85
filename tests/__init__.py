"""
Test suite for base-conversion

Contains:
- tests/unit/          : Unit tests for individual modules
"""
