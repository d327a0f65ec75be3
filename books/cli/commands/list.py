# books/cli/commands/list.py
import click
from books.core.sa.models import BookFilter
from ..utils import book_repository, echo_lines

@click.command(name='ls')
@click.option('-f', '--finished', is_flag=True, help='List finished books')
@click.option('-s', '--in-progress', is_flag=True, help='List books not yet finished')
@click.option('--without-url', is_flag=True, help='List books with no URL')
@click.option('-u', '--unstarted', is_flag=True, help='List books not yet started')
@click.option('-r', '--reading', is_flag=True, help='List books started but not finished')
@click.pass_obj
def ls(db, finished: bool, in_progress: bool, without_url: bool, unstarted: bool, reading: bool):
    """List books, all of them unless a filter is given"""
    selected = [
        book_filter for flag, book_filter in (
            (finished, BookFilter.FINISHED),
            (in_progress, BookFilter.IN_PROGRESS),
            (without_url, BookFilter.WITHOUT_URL),
            (unstarted, BookFilter.UNSTARTED),
            (reading, BookFilter.READING),
        ) if flag
    ]
    if len(selected) > 1:
        raise click.UsageError("Only one of the filter options may be given.")

    with book_repository(db) as repo:
        titles = [book.title for book in repo.ls(selected[0] if selected else BookFilter.ALL)]
    echo_lines(titles)
