"""Owner domain service."""

from typing import Optional

from tallybook.database.sqlalchemy_db import SQLAlchemyTransactionRepository
from tallybook.domain.entities import Owner as OwnerEntity
from tallybook.domain.errors import NotFoundError, ValidationError, owner_not_found


class OwnerService:
    """Service for managing owners of the relational store.

    Passwords are never seen here: the caller hashes them and passes the
    hash, which is stored as an opaque string.
    """

    def __init__(self, repository: SQLAlchemyTransactionRepository):
        """Initialize owner service.

        Args:
            repository: Relational repository instance
        """
        self.repository = repository

    def register(self, name: str, password_hash: Optional[str] = None) -> OwnerEntity:
        """Register a new owner.

        Args:
            name: Unique owner name
            password_hash: Opaque password-verification artifact

        Returns:
            Owner entity

        Raises:
            ValidationError: If the name is empty
            ConflictError: If the name is taken
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Owner name must not be empty")
        owner_id = self.repository.create_owner(name=name, password_hash=password_hash)
        return self.repository.get_owner(owner_id)

    def get_owner(self, owner_id: int) -> Optional[OwnerEntity]:
        return self.repository.get_owner(owner_id)

    def find_by_name(self, name: str) -> Optional[OwnerEntity]:
        return self.repository.get_owner_by_name(name.strip())

    def require_owner(self, name: str) -> OwnerEntity:
        """Get owner by name.

        Raises:
            NotFoundError: If no owner has that name
        """
        owner = self.find_by_name(name)
        if owner is None:
            raise NotFoundError(owner_not_found(name))
        return owner
