"""Estimate foot length and width from a photo with a reference coin."""

__version__ = "1.0.0"
