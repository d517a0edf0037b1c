"""Fallout-style terminal hacking solver."""

__version__ = "0.1.0"
