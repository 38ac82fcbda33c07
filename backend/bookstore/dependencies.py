"""
FastAPI dependencies for the BookStore.
"""
from fastapi import Request

from bookstore.services.store import BookStore


def get_book_store(request: Request) -> BookStore:
    """
    Dependency to get the BookStore owned by the running application.
    """
    return request.app.state.book_store
