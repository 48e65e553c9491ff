"""A tile-based sailing game with wind physics and generated islands."""

__version__ = "0.1.0"