"""In-memory book CRUD service."""

__version__ = "1.0.0"
