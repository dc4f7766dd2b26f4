"""A minimal directory lister, with small string, buffer, list and I/O helpers."""

__version__ = "0.1.0"