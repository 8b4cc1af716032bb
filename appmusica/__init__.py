"""Catalogue of songs, artists, subscribers and plays kept in binary record files."""

__version__ = "0.1.0"