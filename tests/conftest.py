# tests/conftest.py
import sys
import pytest
from pathlib import Path
from click.testing import CliRunner

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from books.core.sa.database import Database
from books.core.sa.repositories.book import BookRepository

@pytest.fixture
def database_url(tmp_path):
    """URL of a fresh SQLite file for one test"""
    return f"sqlite:///{tmp_path / 'test_books.sqlite3'}"

@pytest.fixture
def database(database_url):
    """Create a test database instance with the schema in place"""
    db = Database(database_url)
    db.init_db()
    yield db
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def book_repo(db_session):
    """Fixture to create a BookRepository instance"""
    return BookRepository(db_session)

@pytest.fixture
def runner(database_url):
    """CliRunner whose invocations all use the test database"""
    return CliRunner(env={'BOOKS_DATABASE_URL': database_url})
