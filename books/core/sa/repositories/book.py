# books/core/sa/repositories/book.py
import logging
from typing import Optional, List, Iterable
from datetime import date
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from books.core.exceptions import NotFound, DuplicateTitle, InvalidArgument
from ..models import Book, Author, BookFilter

logger = logging.getLogger(__name__)

class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def get(self, title: str) -> Optional[Book]:
        """Get a book by title"""
        return self.session.get(Book, title)

    def _get_or_raise(self, title: str) -> Book:
        book = self.get(title)
        if book is None:
            raise NotFound(title)
        return book

    def _flush(self, title: str) -> None:
        try:
            self.session.flush()
        except IntegrityError as e:
            # Primary key collision from a concurrent writer
            raise DuplicateTitle(title) from e

    def add(self, title: str, url: Optional[str] = None, authors: Iterable[str] = ()) -> Book:
        """Add a book together with its authors.

        Args:
            title: Title of the book, which identifies it
            url: Optional source URL
            authors: Author names; repeated names are stored once

        Returns:
            The new Book

        Raises:
            InvalidArgument: If the title is blank
            DuplicateTitle: If a book with this title already exists
        """
        if not title or not title.strip():
            raise InvalidArgument("title must not be empty")
        if self.get(title) is not None:
            raise DuplicateTitle(title)

        book = Book(title=title, url=url)
        for name in dict.fromkeys(authors):
            book.authors.append(Author(author=name))
        self.session.add(book)
        self._flush(title)

        logger.info(f"Added {title!r} with {len(book.authors)} author(s)")
        return book

    def start(self, title: str, started: Optional[date] = None) -> Book:
        """Record the date reading began (today by default).

        Raises:
            NotFound: If no book has this title
            InvalidArgument: If the date is later than the recorded finish date
        """
        book = self._get_or_raise(title)
        started = started or date.today()
        if book.end_date is not None and started > book.end_date:
            raise InvalidArgument(
                f"start date {started} is after finish date {book.end_date}"
            )
        book.start_date = started
        self.session.flush()
        logger.info(f"Started {title!r} on {book.start_date}")
        return book

    def finish(self, title: str, finished: Optional[date] = None) -> Book:
        """Record the date reading finished (today by default).

        Raises:
            NotFound: If no book has this title
            InvalidArgument: If the date is earlier than the recorded start date
        """
        book = self._get_or_raise(title)
        finished = finished or date.today()
        if book.start_date is not None and finished < book.start_date:
            raise InvalidArgument(
                f"finish date {finished} is before start date {book.start_date}"
            )
        book.end_date = finished
        self.session.flush()
        logger.info(f"Finished {title!r} on {book.end_date}")
        return book

    def mv(self, old_title: str, new_title: str) -> Book:
        """Rename a book. The author rows follow the new title through the
        foreign key's ON UPDATE CASCADE, within the same transaction."""
        book = self._get_or_raise(old_title)
        if new_title == old_title:
            return book
        if not new_title or not new_title.strip():
            raise InvalidArgument("title must not be empty")
        if self.get(new_title) is not None:
            raise DuplicateTitle(new_title)

        book.title = new_title
        self._flush(new_title)
        logger.info(f"Renamed {old_title!r} to {new_title!r}")
        return book

    def set_url(self, title: str, url: str) -> Book:
        """Replace the URL of a book"""
        book = self._get_or_raise(title)
        book.url = url
        self.session.flush()
        logger.info(f"Set URL of {title!r} to {url}")
        return book

    def rm(self, title: str) -> None:
        """Delete a book and, by cascade, its authors"""
        book = self._get_or_raise(title)
        self.session.delete(book)
        self.session.flush()
        logger.info(f"Removed {title!r}")

    def ls(self, book_filter: BookFilter = BookFilter.ALL) -> List[Book]:
        """List books matching a filter.

        Finished books are ordered by end date, everything else by title.
        """
        query = self.session.query(Book)

        if book_filter == BookFilter.FINISHED:
            query = query.filter(Book.end_date.isnot(None)).order_by(Book.end_date, Book.title)
        else:
            if book_filter == BookFilter.IN_PROGRESS:
                query = query.filter(Book.end_date.is_(None))
            elif book_filter == BookFilter.WITHOUT_URL:
                query = query.filter(Book.url.is_(None))
            elif book_filter == BookFilter.UNSTARTED:
                query = query.filter(Book.start_date.is_(None))
            elif book_filter == BookFilter.READING:
                query = query.filter(
                    Book.start_date.isnot(None),
                    Book.end_date.is_(None)
                )
            query = query.order_by(Book.title)

        books = query.all()
        logger.debug(f"Listed {len(books)} book(s) with filter {book_filter.value}")
        return books

    def show(self, title: str) -> Book:
        """Get a book with its authors loaded.

        Raises:
            NotFound: If no book has this title
        """
        book = (
            self.session.query(Book)
            .options(joinedload(Book.authors))
            .filter(Book.title == title)
            .first()
        )
        if book is None:
            raise NotFound(title)
        return book

    def search_titles(self, prefix: str = "", limit: int = 50) -> List[str]:
        """Titles starting with prefix, used for shell completion"""
        query = self.session.query(Book.title)
        if prefix:
            query = query.filter(Book.title.startswith(prefix, autoescape=True))
        return [title for (title,) in query.order_by(Book.title).limit(limit)]
