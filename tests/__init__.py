"""
Test suite for jacobi_theta

Contains:
- tests/unit/          : Unit tests for individual modules
"""
