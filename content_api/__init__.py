"""Content Discovery API - read-only catalog of themes and plugins."""

__version__ = "1.0.0"
