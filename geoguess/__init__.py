"""Guesses service: where on the map was this photograph taken?"""

__version__ = "1.0.0"
