"""Nonna Kitchen: recipe sharing and community API."""

__version__ = "0.1.0"
