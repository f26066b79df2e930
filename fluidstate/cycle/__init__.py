"""Refrigeration cycle analysis.

Provides component models (compressor, expander, valve, heat exchanger) on
top of the state processes and a solver for single-stage vapor-compression
cycles.
"""
