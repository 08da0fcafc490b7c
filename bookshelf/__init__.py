"""
Bookshelf: an in-memory book catalog.

This package provides a small catalog facade that validates books, stores them
in a swappable in-memory backend (list or set), and answers queries about
book names, authors and collections.
"""

from .exceptions import LibraryError, NotFoundError, ValidationError
from .library import Library
from .models import Book, LibraryCollection
from .storage import DataOperation, ListDataOperation, SetDataOperation, get_data_operation
from .validation import LibraryValidation

__version__ = "1.0.0"
