"""FPV Deal Hunter backend package."""

__version__ = "0.1.0"
