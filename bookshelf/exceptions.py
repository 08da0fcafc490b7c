"""
Error types raised by the Bookshelf catalog.
"""


class LibraryError(Exception):
    """Base class for catalog errors."""


class ValidationError(LibraryError):
    """A book was rejected before being stored."""


class NotFoundError(LibraryError):
    """No book with the requested name is stored."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} - Book Not Found!")
