"""Degree statistics, degree correlations, spanning trees, random graph
models and power-law fits for complex networks."""

__version__ = "1.0.0"