"""Monopoly Board Occupancy Simulator

A tiny, readable Monte Carlo simulator that estimates how often each cell
of the London Monopoly board is landed on.
Uses NumPy only for reproducible, independent per-player random streams.
"""

__version__ = "0.1.0"
