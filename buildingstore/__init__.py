"""Product and supplier management for a building-materials store, stored in SQLite."""

__version__ = "0.1.0"