"""Request and response schemas."""
from bookstore.schemas.book import Book, BookPayload, decode_onto

__all__ = [
    "Book",
    "BookPayload",
    "decode_onto",
]
