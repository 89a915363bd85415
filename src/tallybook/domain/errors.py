"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class FormatError(DomainError):
    """A persisted line could not be decoded into a record."""


class StorageIOError(DomainError):
    """The backing resource could not be read or written."""


class AuthorizationError(DomainError):
    """An owner-scoped operation was invoked without a current owner."""


class UnsupportedOperationError(DomainError):
    """An owner-agnostic entry point was called on an owner-scoped backend."""


def owner_not_found(owner: int | str) -> str:
    """Return message for missing owner by ID or name."""
    if isinstance(owner, int):
        return f"Owner {owner} not found"
    return f"Owner '{owner}' not found"


def duplicate_owner_name(name: str) -> str:
    """Return message for duplicate owner name."""
    return f"Owner with name '{name}' already exists"


def no_current_owner(operation: str) -> str:
    """Return message when a scoped operation runs without an owner."""
    return f"Cannot {operation}: no owner is logged in"


def owner_required(method: str, replacement: str) -> str:
    """Return message for an owner-agnostic call on the relational store."""
    return (
        f"{method}() is not supported by the relational store: "
        f"transactions require an owner, use {replacement}() instead"
    )


def malformed_line(line: str, reason: str) -> str:
    """Return message for a line that failed to decode."""
    return f"Malformed line {line!r}: {reason}"


def future_date(value) -> str:
    """Return message for a user-entered date in the future."""
    return f"Date {value} is in the future"
