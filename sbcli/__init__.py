"""Service bundle CLI."""

__version__ = "0.3.0"
