"""Scan the TEMP folder, report its contents and optionally clean it."""

__version__ = "1.0.0"
__all__ = ["__version__"]