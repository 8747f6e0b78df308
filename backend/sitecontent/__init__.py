"""Fetch upstream release docs, API descriptions and website locale into content/en."""

__version__ = "1.0.0"
