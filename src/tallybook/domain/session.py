"""Current-owner session.

Authentication happens outside tallybook; once it has succeeded the caller
hands the authenticated owner to :meth:`OwnerSession.login_as`.
"""

from typing import Optional

from tallybook.domain.entities import Owner


class OwnerSession:
    """Holds the owner every relational operation is scoped to."""

    def __init__(self, owner: Optional[Owner] = None):
        self._owner: Optional[Owner] = None
        if owner is not None:
            self.login_as(owner)

    def login_as(self, owner: Owner) -> None:
        self._owner = owner

    def logout(self) -> None:
        self._owner = None

    @property
    def is_authenticated(self) -> bool:
        return self._owner is not None

    @property
    def current_owner(self) -> Optional[Owner]:
        return self._owner

    @property
    def current_owner_id(self) -> Optional[int]:
        return self._owner.id if self._owner is not None else None

    @property
    def current_owner_name(self) -> Optional[str]:
        return self._owner.name if self._owner is not None else None
