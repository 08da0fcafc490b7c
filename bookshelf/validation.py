"""
Validation rules applied to books before they reach storage.
"""

from typing import Optional, Sequence


class LibraryValidation:
    """Default rule set: a non-blank name and at least one author."""

    def is_valid_name(self, name: Optional[str]) -> bool:
        """Return True when the name has at least one non-whitespace character."""
        return isinstance(name, str) and bool(name.strip())

    def is_valid_authors(self, authors: Optional[Sequence[str]]) -> bool:
        """
        Return True when at least one author is given.

        A bare string is not a list of authors. Individual author strings are
        not inspected, so blank entries pass.
        """
        return authors is not None and not isinstance(authors, str) and len(authors) > 0
