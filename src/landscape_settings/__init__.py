"""Landscape settings loader and validator."""

__version__ = "0.1.0"
