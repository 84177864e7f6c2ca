"""Height-map loading with string, number, buffer, list, line-reading and formatting helpers."""

__version__ = "0.1.0"