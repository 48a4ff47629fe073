"""
Core mathematical primitives and domain models.

This module contains the reduction engine and the argument models; it has
no dependency on the public API layer.
"""
