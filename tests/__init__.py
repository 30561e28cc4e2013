"""
Test suite for magic-numbers

Contains:
- tests/unit/          : Unit tests for individual modules and the harness
- tests/property/      : Property-based tests (hypothesis)
"""
