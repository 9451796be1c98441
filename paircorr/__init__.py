"""Pair correlation and cumulative coordination analysis of periodic particle configurations."""

__version__ = "0.1.0"