"""
Core domain models, numerical algorithms, and contracts.

Everything here is pure and stateless: bit-level decomposition, exact digit
generation and rounding, independent of string formatting.
"""
