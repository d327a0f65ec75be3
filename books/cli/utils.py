# books/cli/utils.py
import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Iterator, List, Optional
import click
from sqlalchemy.exc import SQLAlchemyError
from click.shell_completion import CompletionItem
from books.core.exceptions import BooksError
from books.core.sa.database import Database
from books.core.sa.repositories.book import BookRepository

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Dates on the command line are plain ISO days
DATE = click.DateTime(formats=['%Y-%m-%d'])

def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr, debug level when verbose"""
    logger = logging.getLogger('books')
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

def to_date(value: Optional[datetime]) -> Optional[date]:
    """Day part of a parsed DATE argument"""
    return value.date() if value is not None else None

@contextmanager
def book_repository(db: Database) -> Iterator[BookRepository]:
    """Run one store operation in its own transaction.

    Store and database errors become ClickExceptions: message on stderr,
    exit status 1.
    """
    try:
        with db.get_db() as session:
            yield BookRepository(session)
    except BooksError as e:
        raise click.ClickException(str(e)) from e
    except SQLAlchemyError as e:
        raise click.ClickException(f"cannot execute statement: {e}") from e

def complete_title(ctx: click.Context, param: click.Parameter, incomplete: str) -> List[CompletionItem]:
    """Complete book titles from the database"""
    db = Database(ctx.find_root().params.get('database_url'))
    db.init_db()
    try:
        with db.get_db() as session:
            titles = BookRepository(session).search_titles(incomplete)
    finally:
        db.dispose()
    return [CompletionItem(title) for title in titles]

def echo_lines(lines: List[str]) -> None:
    """Print lines through the pager; nothing at all for an empty list"""
    if lines:
        click.echo_via_pager("\n".join(lines))
