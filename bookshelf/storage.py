"""
Storage backends holding the catalog's book records.

Every backend implements ``DataOperation``. The list backend keeps insertion
order; the set backend makes no ordering promise. Otherwise they behave the
same, and the ``Library`` facade accepts either.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Set

from .exceptions import NotFoundError
from .models import Book

logger = logging.getLogger(__name__)

Predicate = Callable[[Book], bool]


class DataOperation(ABC):
    """Interface shared by all storage backends."""

    @abstractmethod
    def add(self, value: Book) -> None:
        """Store a record without checking for duplicates."""

    @abstractmethod
    def update(self, value: Book) -> None:
        """Overwrite the authors and collection of the record named ``value.name``."""

    @abstractmethod
    def is_exist(self, name: str) -> bool:
        """Check whether a record with exactly this name is stored."""

    @abstractmethod
    def get_all(self) -> List[Book]:
        """Return every stored record."""

    @abstractmethod
    def get(self, predicate: Optional[Predicate]) -> Optional[Book]:
        """Return the first record matching ``predicate``."""

    @abstractmethod
    def get_list(self, predicate: Optional[Predicate]) -> Optional[List[Book]]:
        """Return every record matching ``predicate``."""


class ListDataOperation(DataOperation):
    """Backend storing records in a list, in insertion order."""

    def __init__(self):
        self.items: List[Book] = []

    def add(self, value: Book) -> None:
        self.items.append(value)
        logger.debug(f"Added '{value.name}' to list storage")

    def update(self, value: Book) -> None:
        """
        Overwrite a stored record in place.

        Args:
            value: Record carrying the new authors and collection

        Raises:
            NotFoundError: If no stored record has the same name
        """
        stored = next((item for item in self.items if item.name == value.name), None)
        if stored is None:
            raise NotFoundError(value.name)
        stored.authors = value.authors
        stored.collection = value.collection
        logger.debug(f"Updated '{value.name}' in list storage")

    def is_exist(self, name: str) -> bool:
        return any(item.name == name for item in self.items)

    def get_all(self) -> List[Book]:
        return list(self.items)

    def get(self, predicate: Optional[Predicate]) -> Optional[Book]:
        if predicate is None:
            return None
        return next((item for item in self.items if predicate(item)), None)

    def get_list(self, predicate: Optional[Predicate]) -> Optional[List[Book]]:
        if predicate is None:
            return None
        return [item for item in self.items if predicate(item)]


class SetDataOperation(DataOperation):
    """Backend storing records in a set; enumeration order is unspecified."""

    def __init__(self):
        self.items: Set[Book] = set()

    def add(self, value: Book) -> None:
        self.items.add(value)
        logger.debug(f"Added '{value.name}' to set storage")

    def update(self, value: Book) -> None:
        """
        Overwrite a stored record in place.

        Records hash by identity, so they can be mutated while they sit in
        the set.

        Args:
            value: Record carrying the new authors and collection

        Raises:
            NotFoundError: If no stored record has the same name
        """
        stored = next((item for item in self.items if item.name == value.name), None)
        if stored is None:
            raise NotFoundError(value.name)
        stored.authors = value.authors
        stored.collection = value.collection
        logger.debug(f"Updated '{value.name}' in set storage")

    def is_exist(self, name: str) -> bool:
        return any(item.name == name for item in self.items)

    def get_all(self) -> List[Book]:
        return list(self.items)

    def get(self, predicate: Optional[Predicate]) -> Optional[Book]:
        if predicate is None:
            return None
        return next((item for item in self.items if predicate(item)), None)

    def get_list(self, predicate: Optional[Predicate]) -> Optional[List[Book]]:
        if predicate is None:
            return None
        return [item for item in self.items if predicate(item)]


BACKENDS = {
    "list": ListDataOperation,
    "set": SetDataOperation,
}


def get_data_operation(kind: str) -> DataOperation:
    """
    Build an empty storage backend by name.

    Args:
        kind: Backend name, "list" or "set" (case-insensitive)

    Returns:
        A fresh DataOperation instance

    Raises:
        ValueError: If the name is not a known backend
    """
    backend_cls = BACKENDS.get((kind or "").strip().lower())
    if backend_cls is None:
        raise ValueError(f"Unknown storage backend '{kind}'. Choose from: {', '.join(BACKENDS)}")
    return backend_cls()
