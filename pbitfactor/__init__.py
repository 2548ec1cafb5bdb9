"""Probabilistic-bit simulator for integer factorisation: configuration, p-bits and runs."""

__version__ = "0.5.0"