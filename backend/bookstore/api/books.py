"""
Routers for /books endpoints (CRUD for books).

The item id is parsed from the raw request path before the method is
dispatched, so a malformed id is reported as 400 whatever the method.
"""
import re
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from bookstore.core.exceptions import BadRequestError, MethodNotAllowedError
from bookstore.dependencies import get_book_store
from bookstore.schemas.book import Book
from bookstore.services.store import BookStore

router = APIRouter(tags=["Books"])

COLLECTION_OTHER_METHODS = ["PUT", "DELETE", "PATCH", "OPTIONS", "TRACE"]
ITEM_OTHER_METHODS = ["POST", "PATCH", "OPTIONS", "TRACE"]

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN, _ID_MAX = -(2 ** 63), 2 ** 63 - 1


def parse_book_id(path: str) -> int:
    """
    Extract the book id from a ``/books/{id}`` path.

    The id is the third ``/``-separated part and must fit a signed 64-bit
    integer; anything after it is ignored.
    """
    parts = path.split("/")
    if len(parts) < 3:
        raise BadRequestError("invalid path")
    if not _ID_PATTERN.fullmatch(parts[2]):
        raise BadRequestError("invalid book ID", field="id")
    book_id = int(parts[2])
    if not _ID_MIN <= book_id <= _ID_MAX:
        raise BadRequestError("invalid book ID", field="id")
    return book_id


def _book_response(book: Book, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content=book.model_dump(), status_code=status_code)


def _books_response(books: List[Book]) -> JSONResponse:
    return JSONResponse(content=[b.model_dump() for b in books])


# Collection route

@router.get("/books", response_model=List[Book])
async def list_books(
    store: BookStore = Depends(get_book_store),
):
    """
    Retrieve all books in the store.
    """
    return _books_response(store.list_books())


@router.post("/books", response_model=Book, status_code=status.HTTP_201_CREATED)
async def create_book(
    request: Request,
    store: BookStore = Depends(get_book_store),
):
    """
    Add a new book. Any id in the body is ignored.
    """
    body = await request.body()
    book = store.create_book(body)
    return _book_response(book, status.HTTP_201_CREATED)


@router.api_route("/books", methods=COLLECTION_OTHER_METHODS, include_in_schema=False)
async def books_method_not_allowed(request: Request):
    raise MethodNotAllowedError(request.method)


# Item route

@router.get("/books/{book_ref:path}", response_model=Book)
async def get_book(
    book_ref: str,
    request: Request,
    store: BookStore = Depends(get_book_store),
):
    """
    Retrieve a single book by its integer ID.
    """
    book_id = parse_book_id(request.url.path)
    return _book_response(store.get_book(book_id))


@router.put("/books/{book_ref:path}", response_model=Book)
async def update_book(
    book_ref: str,
    request: Request,
    store: BookStore = Depends(get_book_store),
):
    """
    Update a book by ID. Fields missing from the body keep their values.
    """
    book_id = parse_book_id(request.url.path)
    body = await request.body()
    return _book_response(store.update_book(book_id, body))


@router.delete("/books/{book_ref:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_ref: str,
    request: Request,
    store: BookStore = Depends(get_book_store),
):
    """
    Delete a book by its integer ID.
    """
    book_id = parse_book_id(request.url.path)
    store.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.api_route("/books/{book_ref:path}", methods=ITEM_OTHER_METHODS, include_in_schema=False)
async def book_method_not_allowed(book_ref: str, request: Request):
    parse_book_id(request.url.path)
    raise MethodNotAllowedError(request.method)
