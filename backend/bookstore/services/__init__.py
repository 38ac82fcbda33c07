"""Business logic services."""
from bookstore.services.store import BookStore

__all__ = [
    "BookStore",
]
