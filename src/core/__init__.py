"""
Core containers, mathematical primitives, and invariants.

This package contains the dynamic vector and the square matrix built on it,
together with their size limits, error taxonomy and token-stream I/O.
"""
