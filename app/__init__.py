"""
Movie Catalog Application Package.

This package contains the in-memory catalog core, the HTTP API built on
it, a Python client for that API, and shared utilities.
"""

__version__ = "1.0.0"
