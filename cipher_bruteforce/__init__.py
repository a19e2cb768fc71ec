"""Classical cipher brute-force engine."""

__version__ = "0.1.0"
