# books/core/exceptions.py


class BooksError(Exception):
    """Base class for errors reported to the user"""


class NotFound(BooksError):
    """Raised when no book has the requested title"""

    def __init__(self, title: str):
        super().__init__(f"not found: {title}")
        self.title = title


class DuplicateTitle(BooksError):
    """Raised when a book with the title already exists"""

    def __init__(self, title: str):
        super().__init__(f"already exists: {title}")
        self.title = title


class InvalidArgument(BooksError):
    """Raised when an argument is malformed or contradicts stored dates"""
