"""Shared pytest fixtures for tallybook tests."""

import tempfile
import os
import pytest

from tallybook.database.factories import create_file_repository, create_sqlite_repository
from tallybook.domain.ledger import LedgerService
from tallybook.domain.owner import OwnerService
from tallybook.domain.session import OwnerSession


@pytest.fixture
def temp_db():
    """Create a temporary SQLite repository for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    repository = create_sqlite_repository(database_path=db_path)
    # Store the path for tests that need it
    repository.database_path = db_path

    yield repository

    # Cleanup
    repository.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def data_file(tmp_path):
    """Path to a not-yet-existing data file in a nested directory."""
    return tmp_path / "data" / "transactions.csv"


@pytest.fixture
def file_repo(data_file):
    """Create a flat-file repository in a temporary directory."""
    return create_file_repository(str(data_file))


@pytest.fixture
def owner_service(temp_db):
    """Create an OwnerService with a temporary database."""
    return OwnerService(temp_db)


@pytest.fixture
def alice(owner_service):
    return owner_service.register("alice", "hash-a")


@pytest.fixture
def bob(owner_service):
    return owner_service.register("bob", "hash-b")


@pytest.fixture
def alice_ledger(temp_db, alice):
    """LedgerService for the relational backend logged in as alice."""
    return LedgerService(temp_db, OwnerSession(alice))


@pytest.fixture
def file_ledger(file_repo):
    """LedgerService for the flat-file backend."""
    return LedgerService(file_repo)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
