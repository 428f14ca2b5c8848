"""Lint rules for Material for MkDocs markdown extensions."""

__version__ = "1.0.0"
