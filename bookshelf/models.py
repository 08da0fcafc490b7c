"""
Pydantic models for the Bookshelf catalog.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class LibraryCollection(str, Enum):
    """Shelf a book belongs to."""

    Reserve = "Reserve"
    General = "General"


class Book(BaseModel):
    """A single catalog entry, keyed by its exact name."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(description="Book title, unique within a catalog")
    authors: List[str] = Field(description="Authors in the order given")
    collection: LibraryCollection = Field(description="Collection the book is shelved in")

    # Identity equality: two separately added books are never merged
    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)
