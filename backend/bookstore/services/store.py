"""Thread-safe in-memory book store."""
import threading
from typing import Dict, List, Union

from pydantic import ValidationError

from bookstore.core.exceptions import BadRequestError, NotFoundError
from bookstore.core.logging import get_logger
from bookstore.schemas.book import Book, decode_onto

logger = get_logger("store")

Body = Union[bytes, str]


class BookStore:
    """
    In-memory collection of books keyed by a generated integer id.

    One lock guards both the collection and the id counter. It is held for
    the whole of every operation, body decoding included, so two writers
    never interleave.
    """

    def __init__(self, start_id: int = 1):
        self._books: Dict[int, Book] = {}
        self._next_id = start_id
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    @property
    def next_id(self) -> int:
        """The id the next created book will receive."""
        with self._lock:
            return self._next_id

    def list_books(self) -> List[Book]:
        """Return a snapshot of all books."""
        with self._lock:
            return [book.model_copy() for book in self._books.values()]

    def create_book(self, candidate: Body) -> Book:
        """
        Decode ``candidate`` and store it under the next id.

        Any id carried by the candidate is ignored.
        """
        with self._lock:
            try:
                book = decode_onto(Book(id=self._next_id), candidate)
            except ValidationError as exc:
                logger.warning(f"Rejected book candidate: {exc.error_count()} error(s)")
                raise BadRequestError("Invalid request") from exc
            self._next_id += 1
            self._books[book.id] = book
            logger.info(f"Created book {book.id}")
            return book.model_copy()

    def get_book(self, book_id: int) -> Book:
        """Return the book stored under ``book_id``."""
        with self._lock:
            book = self._books.get(book_id)
            if book is None:
                logger.debug(f"Book {book_id} not found")
                raise NotFoundError("Book", book_id)
            return book.model_copy()

    def update_book(self, book_id: int, patch: Body) -> Book:
        """
        Decode ``patch`` onto a copy of the stored book and replace it.

        Fields missing from the patch, or set to null, keep their values.
        The id never changes.
        """
        with self._lock:
            existing = self._books.get(book_id)
            if existing is None:
                logger.debug(f"Book {book_id} not found")
                raise NotFoundError("Book", book_id)
            try:
                updated = decode_onto(existing, patch)
            except ValidationError as exc:
                logger.warning(f"Rejected patch for book {book_id}: {exc.error_count()} error(s)")
                raise BadRequestError("Invalid request") from exc
            self._books[book_id] = updated
            logger.info(f"Updated book {book_id}")
            return updated.model_copy()

    def delete_book(self, book_id: int) -> None:
        """Remove the book stored under ``book_id``."""
        with self._lock:
            if book_id not in self._books:
                logger.debug(f"Book {book_id} not found")
                raise NotFoundError("Book", book_id)
            del self._books[book_id]
            logger.info(f"Deleted book {book_id}")
