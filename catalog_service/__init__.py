"""Cloud Native Book Catalog service."""

__version__ = "0.0.1"
