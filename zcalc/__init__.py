"""Linear circuit analysis with phasors, superposition and Bode diagrams."""

__version__ = "0.1.0"