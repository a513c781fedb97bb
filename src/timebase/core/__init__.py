"""
Core value types, exact arithmetic primitives, and timing invariants.

This module contains the foundational building blocks that are independent
of external systems (containers, codecs, native media libraries).
"""
