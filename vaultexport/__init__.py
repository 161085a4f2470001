"""Batch export of markdown vaults to HTML, a single-page map, or pandoc formats."""

__version__ = "0.1.0"
