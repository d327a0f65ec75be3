# books/cli/main.py
import click
from sqlalchemy.exc import SQLAlchemyError
from books import __version__
from books.core.config import get_database_url
from books.core.sa.database import Database
from .commands.book import add, start, finish, rename, set_url, rm, show
from .commands.list import ls
from .commands.help import help_command, completion, PROG_NAME
from .utils import setup_logging

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])

@click.group(context_settings=CONTEXT_SETTINGS)
@click.option('--database', 'database_url', default=None, metavar='URL',
              help='SQLAlchemy database URL (default: BOOKS_DATABASE_URL or the per-user data directory)')
@click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr')
@click.version_option(__version__, prog_name=PROG_NAME)
@click.pass_context
def cli(ctx, database_url, verbose):
    """Keep track of the books you read"""
    setup_logging(verbose)
    url = database_url
    try:
        url = url or get_database_url()
        db = Database(url)
        db.init_db()
    except (SQLAlchemyError, OSError) as e:
        raise click.ClickException(f"cannot open {url or 'database'}: {e}") from e
    ctx.obj = db
    ctx.call_on_close(db.dispose)

cli.add_command(add)
cli.add_command(finish)
cli.add_command(ls)
cli.add_command(rename)
cli.add_command(set_url)
cli.add_command(show)
cli.add_command(start)
cli.add_command(rm)
cli.add_command(help_command)
cli.add_command(completion)

def main():
    """Entry point for the CLI"""
    cli(prog_name=PROG_NAME)

if __name__ == '__main__':
    main()
