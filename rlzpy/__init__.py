"""Relative Lempel-Ziv factorization of positive 64-bit integer sequences against a sampled reference."""

__version__ = "0.1.0"