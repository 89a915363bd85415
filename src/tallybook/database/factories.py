"""Repository factory functions and backend configuration."""

import os
from pathlib import Path
from typing import Optional

from tallybook.database.base import TransactionRepository
from tallybook.database.file_db import FileTransactionRepository
from tallybook.database.models import create_session_factory
from tallybook.database.sqlalchemy_db import SQLAlchemyTransactionRepository

BACKEND_ENV = "TALLYBOOK_BACKEND"
DATA_FILE_ENV = "TALLYBOOK_DATA_FILE"
DB_PATH_ENV = "TALLYBOOK_DB_PATH"

FILE_BACKEND = "file"
SQLITE_BACKEND = "sqlite"
BACKENDS = (FILE_BACKEND, SQLITE_BACKEND)


def default_data_dir() -> Path:
    """Return ~/.tallybook, the default home of all data files."""
    return Path.home() / ".tallybook"


def create_file_repository(data_file: Optional[str] = None) -> FileTransactionRepository:
    """Create a flat-file repository.

    Args:
        data_file: Path to the data file. If None, checks TALLYBOOK_DATA_FILE
            environment variable, then defaults to ~/.tallybook/transactions.csv
    """
    if data_file is None:
        data_file = os.environ.get(DATA_FILE_ENV)

    if data_file is None:
        data_file = str(default_data_dir() / "transactions.csv")

    return FileTransactionRepository(data_file)


def create_sqlite_repository(database_path: Optional[str] = None) -> SQLAlchemyTransactionRepository:
    """Create a relational repository backed by a SQLite file.

    Args:
        database_path: Path to SQLite database file. If None, checks TALLYBOOK_DB_PATH
            environment variable, then defaults to ~/.tallybook/tallybook.db
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        db_dir = default_data_dir()
        db_dir.mkdir(parents=True, exist_ok=True)
        database_path = str(db_dir / "tallybook.db")

    return create_sqlalchemy_repository(f"sqlite:///{database_path}")


def create_sqlalchemy_repository(database_url: str) -> SQLAlchemyTransactionRepository:
    """Create a relational repository for any SQLAlchemy database URL."""
    return SQLAlchemyTransactionRepository(create_session_factory(database_url))


def create_repository(
    backend: Optional[str] = None,
    data_file: Optional[str] = None,
    database_path: Optional[str] = None,
) -> TransactionRepository:
    """Create the repository for the selected backend.

    Args:
        backend: "file" or "sqlite". If None, checks TALLYBOOK_BACKEND, then
            defaults to "file"
        data_file: Data file for the file backend
        database_path: Database file for the sqlite backend

    Raises:
        ValueError: If the backend name is unknown
    """
    if backend is None:
        backend = os.environ.get(BACKEND_ENV, FILE_BACKEND)

    backend = backend.strip().lower()
    if backend == FILE_BACKEND:
        return create_file_repository(data_file)
    if backend == SQLITE_BACKEND:
        return create_sqlite_repository(database_path)
    raise ValueError(f"Unknown backend: '{backend}'. Supported backends: {', '.join(BACKENDS)}")
