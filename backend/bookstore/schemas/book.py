"""Pydantic schemas for the Book resource."""
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class Book(BaseModel):
    """A stored book."""

    id: int
    title: str = ""
    author: str = ""
    price: float = 0.0


class BookPayload(BaseModel):
    """
    Body of a create or update request.

    Every field is optional: a key that is missing or ``null`` leaves the
    corresponding value of the record it is decoded onto untouched. Types are
    checked strictly, so ``"9.99"`` is not a valid price, and neither is a
    non-finite number such as ``NaN`` or an overflowing ``1e400``.
    """

    id: Optional[int] = None
    title: Optional[str] = None
    author: Optional[str] = None
    price: Optional[float] = None

    model_config = ConfigDict(strict=True, allow_inf_nan=False, extra="ignore")


def decode_onto(base: Book, raw: Union[bytes, str]) -> Book:
    """
    Decode a JSON body onto a copy of ``base``.

    The id of ``base`` always wins over any id in the body. Raises
    ``pydantic.ValidationError`` when the body is not a JSON object of the
    book shape.
    """
    payload = BookPayload.model_validate_json(raw)
    changes = payload.model_dump(exclude_none=True, exclude={"id"})
    return base.model_copy(update=changes)
