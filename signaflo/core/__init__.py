"""
Core value types, mathematical primitives, and calendar series factories.

This package contains the foundational building blocks that are independent
of any I/O: immutable scalar types and timestamped observation sequences.
"""
