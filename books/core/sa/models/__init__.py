# books/core/sa/models/__init__.py
from .base import Base
from .book import Book, BookFilter
from .author import Author

__all__ = [
    'Base',
    'Book',
    'BookFilter',
    'Author'
]
