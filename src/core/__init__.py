"""
Core number-theoretic primitives, domain models, and contracts.

This module contains the foundational building blocks that are independent
of the verification harness that drives them.
"""
