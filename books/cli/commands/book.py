# books/cli/commands/book.py
import click
from ..utils import DATE, book_repository, complete_title, echo_lines, to_date

@click.command()
@click.argument('title')
@click.argument('authors', metavar='[AUTHOR]...', nargs=-1)
@click.option('--url', default=None, help='URL of the book')
@click.pass_obj
def add(db, title, authors, url):
    """Add a book

    Example:
        books add "Dune" "Frank Herbert" --url https://example.com/dune
    """
    with book_repository(db) as repo:
        repo.add(title, url=url, authors=authors)

@click.command()
@click.argument('title', shell_complete=complete_title)
@click.argument('date', type=DATE, required=False)
@click.pass_obj
def start(db, title, date):
    """Start reading a book (on DATE, YYYY-MM-DD, default today)"""
    with book_repository(db) as repo:
        repo.start(title, to_date(date))

@click.command()
@click.argument('title', shell_complete=complete_title)
@click.argument('date', type=DATE, required=False)
@click.pass_obj
def finish(db, title, date):
    """Finish reading a book (on DATE, YYYY-MM-DD, default today)"""
    with book_repository(db) as repo:
        repo.finish(title, to_date(date))

@click.command(name='mv')
@click.argument('old_title', shell_complete=complete_title)
@click.argument('new_title')
@click.pass_obj
def rename(db, old_title, new_title):
    """Change a book's title"""
    with book_repository(db) as repo:
        repo.mv(old_title, new_title)

@click.command(name='set-url')
@click.argument('title', shell_complete=complete_title)
@click.argument('url')
@click.pass_obj
def set_url(db, title, url):
    """Set a book's URL"""
    with book_repository(db) as repo:
        repo.set_url(title, url)

@click.command()
@click.argument('title', shell_complete=complete_title)
@click.pass_obj
def rm(db, title):
    """Remove a book and its authors"""
    with book_repository(db) as repo:
        repo.rm(title)

@click.command()
@click.argument('title', shell_complete=complete_title)
@click.pass_obj
def show(db, title):
    """Show a book"""
    with book_repository(db) as repo:
        book = repo.show(title)
        lines = [f"Title: {book.title}"]
        if book.url:
            lines.append(f"URL: {book.url}")
        if book.start_date:
            lines.append(f"Started: {book.start_date.isoformat()}")
        if book.end_date:
            lines.append(f"Finished: {book.end_date.isoformat()}")
        lines.append(f"Authors: {', '.join(book.author_names)}")
    echo_lines(lines)
