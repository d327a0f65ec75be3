# books/core/sa/__init__.py
from .database import Database
from .models import Base, Book, BookFilter, Author

__all__ = [
    'Database',
    'Base',
    'Book',
    'BookFilter',
    'Author'
]
