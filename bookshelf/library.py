"""
Catalog facade coordinating validation and storage.
"""

import logging
from typing import List, Optional, Sequence

import pydantic

from . import settings
from .exceptions import NotFoundError, ValidationError
from .models import Book, LibraryCollection
from .storage import DataOperation, get_data_operation
from .validation import LibraryValidation

logger = logging.getLogger(__name__)


class Library:
    """
    In-memory book catalog.

    Books are keyed by exact name. Adding a name that is already stored
    overwrites that book's authors and collection instead of adding a second
    record.
    """

    def __init__(self, validation: Optional[LibraryValidation] = None,
                 data_operation: Optional[DataOperation] = None):
        """
        Initialize the catalog.

        Args:
            validation: Rule set applied in add_book (default: LibraryValidation)
            data_operation: Storage backend (default: settings.BACKEND)
        """
        self.validation = validation or LibraryValidation()
        self.data_operation = data_operation if data_operation is not None else get_data_operation(settings.BACKEND)

    def add_book(self, name: str, authors: Sequence[str], collection: LibraryCollection) -> None:
        """
        Add a book, or overwrite the stored book with the same name.

        Args:
            name: Book title
            authors: One or more authors
            collection: Collection to shelve the book in

        Raises:
            ValidationError: If the name is blank, no authors are given, or a
                field has the wrong type
        """
        if not self.validation.is_valid_name(name) or not self.validation.is_valid_authors(authors):
            logger.warning(f"Rejected book {name!r} with authors {authors!r}")
            raise ValidationError("Invalid book")

        try:
            book = Book(name=name, authors=list(authors), collection=collection)
        except pydantic.ValidationError as e:
            logger.warning(f"Rejected book {name!r}: {e}")
            raise ValidationError("Invalid book") from e

        if self.data_operation.is_exist(name):
            self.data_operation.update(book)
            logger.info(f"Updated book '{name}'")
        else:
            self.data_operation.add(book)
            logger.info(f"Added book '{name}'")

    def get_book_names(self, collection: Optional[LibraryCollection] = None) -> List[str]:
        """
        List stored book names in storage order.

        Args:
            collection: Only list books in this collection when given

        Returns:
            Book names
        """
        if collection is None:
            books = self.data_operation.get_all()
        else:
            books = self.data_operation.get_list(lambda book: book.collection == collection)
        return [book.name for book in books]

    def get_book_authors(self, name: str) -> List[str]:
        """
        Get the authors of a book.

        Raises:
            NotFoundError: If no book has this exact name
        """
        return list(self._find(name).authors)

    def get_book_collection(self, name: str) -> LibraryCollection:
        """
        Get the collection a book is shelved in.

        Raises:
            NotFoundError: If no book has this exact name
        """
        return self._find(name).collection

    def _find(self, name: str) -> Book:
        book = self.data_operation.get(lambda item: item.name == name)
        if book is None:
            logger.warning(f"Book '{name}' not found")
            raise NotFoundError(name)
        return book
