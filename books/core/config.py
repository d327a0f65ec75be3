# books/core/config.py
import os
from pathlib import Path

import click

APP_NAME = "books"
DATABASE_FILENAME = "database.sqlite3"
DATABASE_URL_ENV = "BOOKS_DATABASE_URL"


def get_data_dir() -> Path:
    """Per-user directory holding the database file"""
    return Path(click.get_app_dir(APP_NAME))


def get_database_url() -> str:
    """Resolve the database URL

    BOOKS_DATABASE_URL wins when set. Otherwise the SQLite file lives in the
    per-user application directory, which is created private to the user.
    """
    url = os.getenv(DATABASE_URL_ENV)
    if url:
        return url

    data_dir = get_data_dir()
    data_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / DATABASE_FILENAME}"
