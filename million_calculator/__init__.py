"""Projection of the years needed to reach the first million."""

__version__ = "0.1.0"
