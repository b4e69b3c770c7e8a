"""Converters between geo shapes and document-database documents."""

__version__ = "0.1.0"
