"""
Core domain models and numeric primitives.

Representations, value ranges, tagged numeric values and the range
comparison logic shared by every conversion contract.
"""
