"""Persistence layer for tallybook application."""

from tallybook.database.base import TransactionRepository
from tallybook.database.factories import (
    create_file_repository,
    create_repository,
    create_sqlite_repository,
)

__all__ = [
    "TransactionRepository",
    "create_file_repository",
    "create_repository",
    "create_sqlite_repository",
]
